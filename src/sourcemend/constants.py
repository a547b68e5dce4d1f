# topmark:header:start
#
#   project      : SourceMend
#   file         : constants.py
#   file_relpath : src/sourcemend/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SourceMend Constants.

The message fragments below are matched verbatim against the diagnostics of the
upstream Java parser. They must follow its exact phrasing for the recovery
strategies to fire.
"""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

SOURCEMEND_VERSION: str = get_version("sourcemend")

# Config discovery
CONFIG_FILE_NAME: Final[str] = "sourcemend.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

# Rewriting
LINE_COMMENT_MARKER: Final[str] = "//"
PLACEHOLDER_FILLER: Final[str] = "?"
STATEMENT_TERMINATOR: Final[str] = ";"

# Embedded lexer locations, e.g. "Lexical error at line 5, column 14."
LEXICAL_LOCATION_HINT: Final[str] = "at line "

# Decompiler pseudocode
DECOMPILER_SENTINEL: Final[str] = "** "
DECOMPILER_CONTINUE: Final[str] = "** continue;"
DECOMPILER_CASE: Final[str] = "** case "
DECOMPILER_GOTO: Final[str] = "** GOTO "

# Unfinished expression ("did you mean to assign that?")
MSG_PARSE_ERROR_FOUND: Final[str] = 'Parse error. Found "'
MSG_EXPECTED_ONE_OF: Final[str] = "expected one of"
MSG_COMPOUND_ASSIGNMENT: Final[str] = ">>>="

# Unterminated string literal
MSG_ENCOUNTERED_NEWLINE: Final[str] = 'Encountered: "\\n"'
MSG_AFTER_QUOTE: Final[str] = 'after : "\\"'
MSG_AFTER_PREFIX: Final[str] = 'after : "\\'

# Brace imbalance
MSG_EXPECTED_CLOSE_BRACE: Final[str] = 'expected "}"'
MSG_EXPECTED_OPEN_BRACE: Final[str] = 'expected "{"'
