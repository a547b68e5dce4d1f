# topmark:header:start
#
#   project      : SourceMend
#   file         : keys.py
#   file_relpath : src/sourcemend/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for SourceMend configuration.

Keys defined here are the external configuration API, as it appears in
``sourcemend.toml`` and in ``[tool.sourcemend]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SourceMend configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_SOURCEMEND: Final[str] = "sourcemend"

    # Discovery
    KEY_ROOT: Final[str] = "root"

    # [recovery]
    SECTION_RECOVERY: Final[str] = "recovery"

    KEY_STRATEGIES: Final[str] = "strategies"
    KEY_PAD_SHORTENED_LINES: Final[str] = "pad-shortened-lines"
