# topmark:header:start
#
#   project      : SourceMend
#   file         : classifier.py
#   file_relpath : src/sourcemend/recovery/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split parser diagnostics into line-indexed buckets.

Two kinds of diagnostics reach the engine:

- *Structural problems* carry a span resolved by the parser. They are grouped by
  the line their span begins on.
- *Lexical failures* have no span because the lexer aborted before structural
  parsing; their location only exists as text (``... at line 5, column 14 ...``).
  They are grouped by the line extracted from the message.

A diagnostic that cannot be localized either way is left out. Recovery is
best-effort, so this is never an error.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from sourcemend.config.logging import get_logger
from sourcemend.constants import LEXICAL_LOCATION_HINT
from sourcemend.diagnostic.model import LexicalFailure

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sourcemend.config.logging import SourcemendLogger
    from sourcemend.diagnostic.model import LexicalFailuresByLine, ProblemsByLine
    from sourcemend.diagnostic.types import DiagnosticLike

logger: SourcemendLogger = get_logger(__name__)

LOCATION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"line (?P<line>[0-9]+), column (?P<column>[0-9]+)"
)


def locate_lexical_failure(diagnostic: DiagnosticLike) -> LexicalFailure | None:
    """Extract the embedded location of a span-less diagnostic.

    Args:
        diagnostic (DiagnosticLike): The diagnostic to inspect.

    Returns:
        LexicalFailure | None: The localized failure, or ``None`` if the
            diagnostic has a span or its message carries no usable location.
    """
    if diagnostic.span is not None:
        return None
    message: str = diagnostic.message
    if LEXICAL_LOCATION_HINT not in message:
        return None
    match: re.Match[str] | None = LOCATION_PATTERN.search(message)
    if match is None:
        return None
    return LexicalFailure(
        diagnostic=diagnostic,
        line=int(match.group("line"), 10),
        column=int(match.group("column"), 10),
    )


def classify(
    diagnostics: Iterable[DiagnosticLike],
) -> tuple[ProblemsByLine, LexicalFailuresByLine]:
    """Build the structural-problem and lexical-failure maps for one pass.

    Args:
        diagnostics (Iterable[DiagnosticLike]): All diagnostics from the failed parse.

    Returns:
        tuple[ProblemsByLine, LexicalFailuresByLine]: ``(problems, lexical_failures)``,
            both keyed by 1-based line number with insertion order preserved per line.
    """
    problems: ProblemsByLine = {}
    lexical_failures: LexicalFailuresByLine = {}

    for diagnostic in diagnostics:
        if diagnostic.span is not None:
            problems.setdefault(diagnostic.span.begin.line, []).append(diagnostic)
            continue

        failure: LexicalFailure | None = locate_lexical_failure(diagnostic)
        if failure is None:
            logger.trace("Dropping unlocalizable diagnostic: %r", diagnostic.message)
            continue
        lexical_failures.setdefault(failure.line, []).append(failure)

    logger.debug(
        "Classified diagnostics: %d structural line(s), %d lexical line(s)",
        len(problems),
        len(lexical_failures),
    )
    return problems, lexical_failures
