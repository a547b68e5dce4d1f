# topmark:header:start
#
#   project      : SourceMend
#   file         : rewriter.py
#   file_relpath : src/sourcemend/recovery/rewriter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Offset-preserving source rewriter.

Walks the source line by line, runs the strategy pipeline on each line, applies
at most one decision, and repairs the line length so that absolute offsets in the
rest of the document stay where the failed parse reported them:

* ``LINE_COMMENT``: the first two characters are replaced by ``//``. Lines shorter
  than two characters are left untouched.
* ``TEXT_EDIT`` that made the line longer: the surplus is cut from the front if it
  is whitespace only; otherwise the longer line is kept (offsets after it drift)
  and the rejection is logged at TRACE level.
* ``TEXT_EDIT`` that made the line shorter: the line is left-padded with spaces
  (can be disabled).

Lines are split on ``\r\n``, ``\r`` or ``\n`` and reassembled with ``\n`` after
every line, whatever the original convention was.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from sourcemend.config.logging import get_logger
from sourcemend.constants import LINE_COMMENT_MARKER
from sourcemend.errors import SourceReadError
from sourcemend.recovery.model import (
    LinePatch,
    LineState,
    PatchDecision,
    RecoveryReport,
    RewriteResult,
)
from sourcemend.recovery.strategies import STRATEGIES, run_strategies

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from sourcemend.config.logging import SourcemendLogger
    from sourcemend.diagnostic.model import LexicalFailuresByLine, ProblemsByLine
    from sourcemend.recovery.strategies import Strategy

logger: SourcemendLogger = get_logger(__name__)

LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def iter_source_lines(source: str | bytes) -> Iterator[LineState]:
    """Yield the physical lines of ``source`` as fresh `LineState` records.

    A trailing line break does not produce an extra empty line; empty input
    produces no lines.

    Args:
        source (str | bytes): Source text; ``bytes`` are decoded as UTF-8.

    Yields:
        LineState: One record per line, numbered from 1.

    Raises:
        SourceReadError: If ``source`` cannot be consumed as text.
    """
    if isinstance(source, bytes):
        try:
            source = source.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SourceReadError(f"Source is not valid UTF-8: {exc}") from exc
    if not isinstance(source, str):
        raise SourceReadError(f"Cannot read lines from {type(source).__name__}")
    if not source:
        return

    lines: list[str] = LINE_BREAK.split(source)
    if lines[-1] == "":
        lines.pop()
    for number, text in enumerate(lines, 1):
        yield LineState(number=number, text=text)


def comment_out(text: str) -> str:
    """Replace the first two characters of ``text`` with the line-comment marker.

    Lines shorter than the marker are returned unchanged.
    """
    if len(text) < len(LINE_COMMENT_MARKER):
        return text
    return LINE_COMMENT_MARKER + text[len(LINE_COMMENT_MARKER) :]


def fit_length(original: str, edited: str, *, pad: bool = True, number: int = 0) -> str:
    """Bring ``edited`` back to the length of ``original`` where it is safe to do so.

    Args:
        original (str): Line text before the edit.
        edited (str): Line text after the edit.
        pad (bool): Left-pad lines that became shorter.
        number (int): Line number, for logging only.

    Returns:
        str: The length-repaired text; ``edited`` itself when no safe repair exists.
    """
    size_diff: int = len(original) - len(edited)
    if size_diff < 0:
        surplus: str = edited[:-size_diff]
        if surplus.strip() == "":
            return edited[-size_diff:]
        logger.trace(
            "Line %d: could not accommodate for inserted patch text: %d", number, size_diff
        )
        return edited
    if size_diff > 0 and pad:
        return " " * size_diff + edited
    return edited


def rewrite(
    source: str | bytes,
    problems: ProblemsByLine,
    lexical_failures: LexicalFailuresByLine,
    *,
    strategies: Sequence[Strategy] = STRATEGIES,
    pad_shortened_lines: bool = True,
) -> RewriteResult:
    """Rewrite ``source`` with at most one strategy decision applied per line.

    Args:
        source (str | bytes): The source that failed to parse.
        problems (ProblemsByLine): Structural problems by line.
        lexical_failures (LexicalFailuresByLine): Lexical failures by line.
        strategies (Sequence[Strategy]): Strategy pipeline, in priority order.
        pad_shortened_lines (bool): Left-pad text edits that shortened a line.

    Returns:
        RewriteResult: The patched text (``\\n`` after every line) and a report
            of the lines that were changed.

    Raises:
        SourceReadError: If ``source`` cannot be consumed as text.
    """
    out: list[str] = []
    report = RecoveryReport()

    for line in iter_source_lines(source):
        original: str = line.text
        strategy, decision = run_strategies(line, problems, lexical_failures, strategies)

        if decision == PatchDecision.LINE_COMMENT:
            line.text = comment_out(line.text)
        elif decision == PatchDecision.TEXT_EDIT:
            line.text = fit_length(
                original, line.text, pad=pad_shortened_lines, number=line.number
            )

        if strategy is not None and line.text != original:
            report.add(
                LinePatch(
                    number=line.number,
                    strategy=strategy.name,
                    decision=decision,
                    original=original,
                    patched=line.text,
                )
            )
        out.append(line.text)
        out.append("\n")

    if report.drifting_lines():
        logger.debug("Offsets drift after line(s): %s", report.drifting_lines())
    return RewriteResult(text="".join(out), report=report)


def rewrite_text(
    source: str | bytes,
    problems: ProblemsByLine,
    lexical_failures: LexicalFailuresByLine,
    *,
    strategies: Sequence[Strategy] = STRATEGIES,
    pad_shortened_lines: bool = True,
) -> str:
    """Like [`rewrite`][sourcemend.recovery.rewriter.rewrite], returning only the text."""
    return rewrite(
        source,
        problems,
        lexical_failures,
        strategies=strategies,
        pad_shortened_lines=pad_shortened_lines,
    ).text
