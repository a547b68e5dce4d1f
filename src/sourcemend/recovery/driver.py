# topmark:header:start
#
#   project      : SourceMend
#   file         : driver.py
#   file_relpath : src/sourcemend/recovery/driver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recovery driver: classify, rewrite, reparse.

One call performs exactly one recovery pass::

    diagnostics + source -> classify -> rewrite -> parser(patched text)

The parser's second result is returned unchanged. The driver never recurses:
whether to attempt another pass on the new diagnostics is the caller's decision.

The parser is an external collaborator; anything matching the `Parser`
protocol works, e.g. a thin adapter around a Java parser library that maps its
problems to [`Diagnostic`][sourcemend.diagnostic.model.Diagnostic].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from sourcemend.config.logging import get_logger
from sourcemend.config.model import Config
from sourcemend.recovery.classifier import classify
from sourcemend.recovery.rewriter import rewrite
from sourcemend.recovery.strategies import select_strategies

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sourcemend.config.logging import SourcemendLogger
    from sourcemend.diagnostic.types import DiagnosticLike
    from sourcemend.recovery.model import RecoveryReport, RewriteResult

logger: SourcemendLogger = get_logger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Result of one parser invocation.

    Attributes:
        tree (T | None): The parse tree, possibly partial.
        diagnostics (tuple[DiagnosticLike, ...]): Problems reported by the parser.
    """

    tree: T | None = None
    diagnostics: tuple[DiagnosticLike, ...] = field(default_factory=tuple)

    @property
    def successful(self) -> bool:
        """Return True when a tree was produced without diagnostics."""
        return self.tree is not None and not self.diagnostics


class Parser(Protocol[T_co]):
    """External parser entry point: source text in, `ParseResult` out."""

    def __call__(self, source: str) -> ParseResult[T_co]:
        """Parse ``source`` and report the problems found."""
        ...


@dataclass(frozen=True)
class RecoveryOutcome(Generic[T]):
    """Everything one recovery pass produced.

    Attributes:
        patched_source (str): The rewritten source handed to the parser.
        report (RecoveryReport): Lines that were patched, and how.
        result (ParseResult[T]): The parser's second result, unchanged.
    """

    patched_source: str
    report: RecoveryReport
    result: ParseResult[T]


def patch_source(
    source: str | bytes,
    diagnostics: Iterable[DiagnosticLike],
    *,
    config: Config | None = None,
) -> RewriteResult:
    """Classify ``diagnostics`` and rewrite ``source`` without reparsing.

    Args:
        source (str | bytes): The source that failed to parse.
        diagnostics (Iterable[DiagnosticLike]): Problems from the failed parse.
        config (Config | None): Recovery settings; defaults apply when ``None``.

    Returns:
        RewriteResult: The patched text and its report.

    Raises:
        SourceReadError: If ``source`` cannot be consumed as text.
    """
    cfg: Config = config or Config()
    problems, lexical_failures = classify(diagnostics)
    return rewrite(
        source,
        problems,
        lexical_failures,
        strategies=select_strategies(cfg.strategies),
        pad_shortened_lines=cfg.pad_shortened_lines,
    )


def recover_with_report(
    source: str | bytes,
    diagnostics: Iterable[DiagnosticLike],
    parser: Parser[T],
    *,
    config: Config | None = None,
) -> RecoveryOutcome[T]:
    """Run one recovery pass and return the patched source, report and reparse result."""
    patched: RewriteResult = patch_source(source, diagnostics, config=config)
    logger.info("Recovery patched %d line(s); reparsing", len(patched.report))
    result: ParseResult[T] = parser(patched.text)
    logger.debug(
        "Reparse %s with %d diagnostic(s)",
        "succeeded" if result.successful else "failed",
        len(result.diagnostics),
    )
    return RecoveryOutcome(patched_source=patched.text, report=patched.report, result=result)


def recover(
    source: str | bytes,
    diagnostics: Iterable[DiagnosticLike],
    parser: Parser[T],
    *,
    config: Config | None = None,
) -> ParseResult[T]:
    """Patch ``source`` using ``diagnostics`` and parse it once more.

    Args:
        source (str | bytes): The source that failed to parse.
        diagnostics (Iterable[DiagnosticLike]): Problems from the failed parse.
        parser (Parser[T]): The same parser entry point used for the failed pass.
        config (Config | None): Recovery settings; defaults apply when ``None``.

    Returns:
        ParseResult[T]: The parser's result for the patched source, unchanged.

    Raises:
        SourceReadError: If ``source`` cannot be consumed as text.
    """
    return recover_with_report(source, diagnostics, parser, config=config).result


def parse_with_recovery(
    source: str,
    parser: Parser[T],
    *,
    config: Config | None = None,
) -> ParseResult[T]:
    """Parse ``source``; on failure run exactly one recovery pass.

    Args:
        source (str): Source text.
        parser (Parser[T]): Parser entry point.
        config (Config | None): Recovery settings; defaults apply when ``None``.

    Returns:
        ParseResult[T]: The first result if it succeeded, otherwise the result
            of the recovery pass.
    """
    first: ParseResult[T] = parser(source)
    if first.successful:
        return first
    diagnostics: Sequence[Any] = first.diagnostics
    logger.info("Initial parse reported %d problem(s); attempting recovery", len(diagnostics))
    return recover(source, diagnostics, parser, config=config)
