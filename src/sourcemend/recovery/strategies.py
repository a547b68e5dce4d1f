# topmark:header:start
#
#   project      : SourceMend
#   file         : strategies.py
#   file_relpath : src/sourcemend/recovery/strategies.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line patch strategies.

Each strategy is a plain function::

    strategy(line, problems, lexical_failures) -> PatchDecision

It inspects one `LineState` plus the classified diagnostics and either leaves the
line alone (``NONE``), asks for the whole line to be commented out
(``LINE_COMMENT``), or rewrites ``line.text`` in place (``TEXT_EDIT``).

Strategies run in the fixed order of `STRATEGIES`; the rewriter stops at the first
decision that is not ``NONE``. The set is closed and order-sensitive:

1. ``decompiler_artifacts``: pseudocode markers left by a bytecode decompiler.
2. ``missing_terminator``: an expression statement missing its ``;``.
3. ``missing_quote``: a string literal left open at the end of the line.
4. ``curly_braces``: lines around brace mismatches, and lines with any other
   structural problem.

The heuristics key off the exact message phrasing of the upstream Java parser
(see [`sourcemend.constants`][sourcemend.constants]).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Protocol

from sourcemend.config.logging import get_logger
from sourcemend.constants import (
    DECOMPILER_CASE,
    DECOMPILER_CONTINUE,
    DECOMPILER_GOTO,
    DECOMPILER_SENTINEL,
    MSG_AFTER_PREFIX,
    MSG_AFTER_QUOTE,
    MSG_COMPOUND_ASSIGNMENT,
    MSG_ENCOUNTERED_NEWLINE,
    MSG_EXPECTED_CLOSE_BRACE,
    MSG_EXPECTED_ONE_OF,
    MSG_EXPECTED_OPEN_BRACE,
    MSG_PARSE_ERROR_FOUND,
    PLACEHOLDER_FILLER,
    STATEMENT_TERMINATOR,
)
from sourcemend.recovery.model import LineState, PatchDecision

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sourcemend.config.logging import SourcemendLogger
    from sourcemend.diagnostic.model import LexicalFailure, LexicalFailuresByLine, ProblemsByLine
    from sourcemend.diagnostic.types import DiagnosticLike

logger: SourcemendLogger = get_logger(__name__)


class StrategyFunc(Protocol):
    """Signature shared by all line patch strategies."""

    def __call__(
        self,
        line: LineState,
        problems: ProblemsByLine,
        lexical_failures: LexicalFailuresByLine,
    ) -> PatchDecision:
        """Inspect ``line`` and return a decision, editing ``line.text`` for TEXT_EDIT."""
        ...


@dataclass(frozen=True)
class Strategy:
    """A named strategy in the recovery pipeline.

    Attributes:
        name (str): Stable identifier used in config files, CLI flags and reports.
        summary (str): One-line human description.
        func (StrategyFunc): The strategy function.
    """

    name: str
    summary: str
    func: StrategyFunc

    def __call__(
        self,
        line: LineState,
        problems: ProblemsByLine,
        lexical_failures: LexicalFailuresByLine,
    ) -> PatchDecision:
        return self.func(line, problems, lexical_failures)


def recover_decompiler_artifacts(
    line: LineState,
    problems: ProblemsByLine,
    lexical_failures: LexicalFailuresByLine,
) -> PatchDecision:
    """Clean up ``** ...`` pseudocode emitted by decompilers.

    Three embedded forms are rewritten into valid statements in place:

    - ``** continue;`` becomes ``continue;``
    - ``** case X`` becomes ``case X``
    - ``** GOTO label`` becomes ``break label;`` (the pseudocode has no terminator
      and is always the last statement on its line)

    Any other line whose trimmed text starts with ``** `` is commented out.
    """
    text: str = line.text
    if DECOMPILER_CONTINUE in text:
        line.text = text.replace(DECOMPILER_CONTINUE, "continue;")
        return PatchDecision.TEXT_EDIT
    if DECOMPILER_CASE in text:
        line.text = text.replace(DECOMPILER_CASE, "case ")
        return PatchDecision.TEXT_EDIT
    if DECOMPILER_GOTO in text:
        line.text = text.replace(DECOMPILER_GOTO, "break ") + STATEMENT_TERMINATOR
        return PatchDecision.TEXT_EDIT
    if text.strip().startswith(DECOMPILER_SENTINEL):
        return PatchDecision.LINE_COMMENT
    return PatchDecision.NONE


def recover_missing_terminator(
    line: LineState,
    problems: ProblemsByLine,
    lexical_failures: LexicalFailuresByLine,
) -> PatchDecision:
    """Append ``;`` to a dangling expression statement.

    The parser never says "missing semicolon". For ``int x = 5`` followed by a
    ``}`` it reports the unexpected token and lists every assignment operator it
    would have accepted instead, ``>>>=`` among them.
    """
    line_problems: list[DiagnosticLike] = problems.get(line.number, [])
    if len(line_problems) != 1:
        return PatchDecision.NONE
    message: str = line_problems[0].message
    if not (
        MSG_PARSE_ERROR_FOUND in message
        and MSG_EXPECTED_ONE_OF in message
        and MSG_COMPOUND_ASSIGNMENT in message
    ):
        return PatchDecision.NONE
    trimmed: str = line.text.strip()
    if not trimmed or trimmed.endswith(STATEMENT_TERMINATOR):
        return PatchDecision.NONE
    line.text += STATEMENT_TERMINATOR
    return PatchDecision.TEXT_EDIT


def recover_missing_quote(
    line: LineState,
    problems: ProblemsByLine,
    lexical_failures: LexicalFailuresByLine,
) -> PatchDecision:
    """Close a string literal the lexer found unterminated at end of line.

    The lexer reports ``Encountered: "\\n" ... after : "\\"<fragment>"`` where the
    fragment is the opened literal up to the line break. The literal is replaced
    by a ``"???"`` placeholder that ends right before the first ``)`` (or, failing
    that, the first ``;``) after the opening quote. The placeholder is sized so
    the line keeps its length; it always holds at least one filler character.
    """
    line_failures: list[LexicalFailure] = lexical_failures.get(line.number, [])
    if len(line_failures) != 1:
        return PatchDecision.NONE
    message: str = line_failures[0].message
    if MSG_ENCOUNTERED_NEWLINE not in message or MSG_AFTER_QUOTE not in message:
        return PatchDecision.NONE

    fragment: str = message[message.rfind(MSG_AFTER_PREFIX) + len(MSG_AFTER_PREFIX) : -1]
    original: str = line.text
    start: int = original.find(fragment) if fragment else -1
    if start < 0:
        logger.trace("Line %d: offending fragment %r not found", line.number, fragment)
        return PatchDecision.NONE

    rest: str = original[start + 1 :]
    end: int = rest.find(")")
    if end < 0:
        end = rest.find(STATEMENT_TERMINATOR)
    suffix: str = rest[end:] if end >= 0 else ""

    filler_len: int = max(1, len(original) - start - len(suffix) - 2)
    line.text = original[:start] + '"' + PLACEHOLDER_FILLER * filler_len + '"' + suffix
    return PatchDecision.TEXT_EDIT


def _mentions(diagnostics: Iterable[DiagnosticLike], *fragments: str) -> bool:
    return any(f in d.message for d in diagnostics for f in fragments)


def recover_curly_braces(
    line: LineState,
    problems: ProblemsByLine,
    lexical_failures: LexicalFailuresByLine,
) -> PatchDecision:
    """Comment out lines implicated in brace mismatches.

    Checked in order:

    - the line has structural problems, none about an expected brace;
    - the previous line has a problem expecting ``}``;
    - the next line has a problem expecting ``{``.
    """
    current: list[DiagnosticLike] = problems.get(line.number, [])
    if current and not _mentions(current, MSG_EXPECTED_CLOSE_BRACE, MSG_EXPECTED_OPEN_BRACE):
        return PatchDecision.LINE_COMMENT

    if _mentions(problems.get(line.number - 1, []), MSG_EXPECTED_CLOSE_BRACE):
        return PatchDecision.LINE_COMMENT

    if _mentions(problems.get(line.number + 1, []), MSG_EXPECTED_OPEN_BRACE):
        return PatchDecision.LINE_COMMENT

    return PatchDecision.NONE


STRATEGIES: Final[tuple[Strategy, ...]] = (
    Strategy(
        "decompiler_artifacts",
        "Rewrite or comment out '** ...' decompiler pseudocode",
        recover_decompiler_artifacts,
    ),
    Strategy(
        "missing_terminator",
        "Append ';' to an unfinished expression statement",
        recover_missing_terminator,
    ),
    Strategy(
        "missing_quote",
        "Close a string literal left open at end of line",
        recover_missing_quote,
    ),
    Strategy(
        "curly_braces",
        "Comment out lines around brace mismatches and other structural problems",
        recover_curly_braces,
    ),
)

STRATEGY_NAMES: Final[tuple[str, ...]] = tuple(s.name for s in STRATEGIES)


def select_strategies(names: Iterable[str] | None) -> tuple[Strategy, ...]:
    """Return the enabled strategies, always in pipeline order.

    Args:
        names (Iterable[str] | None): Names to enable; ``None`` enables all.
            Unknown names are logged and ignored.

    Returns:
        tuple[Strategy, ...]: The selected strategies, in `STRATEGIES` order.
    """
    if names is None:
        return STRATEGIES
    wanted: set[str] = set(names)
    unknown: Sequence[str] = sorted(wanted.difference(STRATEGY_NAMES))
    if unknown:
        logger.warning("Ignoring unknown recovery strategies: %s", ", ".join(unknown))
    return tuple(s for s in STRATEGIES if s.name in wanted)


def run_strategies(
    line: LineState,
    problems: ProblemsByLine,
    lexical_failures: LexicalFailuresByLine,
    strategies: Sequence[Strategy] = STRATEGIES,
) -> tuple[Strategy | None, PatchDecision]:
    """Evaluate ``strategies`` against ``line`` until one fires.

    Returns:
        tuple[Strategy | None, PatchDecision]: The strategy that fired and its
            decision, or ``(None, PatchDecision.NONE)``.
    """
    for strategy in strategies:
        decision: PatchDecision = strategy(line, problems, lexical_failures)
        if decision != PatchDecision.NONE:
            logger.debug("Line %d: %s -> %s", line.number, strategy.name, decision.value)
            return strategy, decision
    return None, PatchDecision.NONE
