# topmark:header:start
#
#   project      : SourceMend
#   file         : test_driver.py
#   file_relpath : tests/recovery/test_driver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Driver tests: one recovery pass with a scripted stand-in parser.

`ScriptedParser` records every source it is asked to parse and answers from a
queue of canned results, so the tests can check both what was reparsed and that
the second result is handed back untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sourcemend.config.model import Config
from sourcemend.diagnostic.model import Diagnostic
from sourcemend.recovery.driver import (
    ParseResult,
    parse_with_recovery,
    patch_source,
    recover,
    recover_with_report,
)
from tests.conftest import GENERIC_PARSE_MESSAGE, MISSING_TERMINATOR_MESSAGE, problem

if TYPE_CHECKING:
    from sourcemend.recovery.driver import RecoveryOutcome
    from sourcemend.recovery.model import RewriteResult


class ScriptedParser:
    """Parser stand-in returning canned results in order."""

    def __init__(self, *results: ParseResult[str]) -> None:
        self.results: list[ParseResult[str]] = list(results)
        self.seen: list[str] = []

    def __call__(self, source: str) -> ParseResult[str]:
        self.seen.append(source)
        return self.results.pop(0)


SOURCE = "class A {\n  void m() {\n    int x = 5\n  }\n}\n"
PATCHED = "class A {\n  void m() {\n   int x = 5;\n  }\n}\n"


def test_recover_reparses_patched_source() -> None:
    """The parser sees the patched text and its result is returned unchanged."""
    second: ParseResult[str] = ParseResult(tree="cu")
    parser = ScriptedParser(second)

    result: ParseResult[str] = recover(
        SOURCE, [problem(MISSING_TERMINATOR_MESSAGE, 3, 14)], parser
    )

    assert result is second
    assert result.successful
    assert parser.seen == [PATCHED]


def test_recover_returns_failed_reparse_as_is() -> None:
    """The driver never recurses, even when the second parse still fails."""
    still_broken: ParseResult[str] = ParseResult(
        tree="partial", diagnostics=(problem(GENERIC_PARSE_MESSAGE, 1),)
    )
    parser = ScriptedParser(still_broken)

    result: ParseResult[str] = recover(SOURCE, [problem(GENERIC_PARSE_MESSAGE, 2, 3)], parser)

    assert result is still_broken
    assert not result.successful
    assert len(parser.seen) == 1


def test_recover_with_report_exposes_patch_details() -> None:
    """The outcome carries the patched text and the per-line report."""
    parser = ScriptedParser(ParseResult(tree="cu"))

    outcome: RecoveryOutcome[str] = recover_with_report(
        SOURCE, [problem(MISSING_TERMINATOR_MESSAGE, 3, 14)], parser
    )

    assert outcome.patched_source == PATCHED
    assert outcome.report.by_strategy() == {"missing_terminator": 1}
    assert outcome.result.tree == "cu"


def test_patch_source_honors_config() -> None:
    """Disabled strategies and padding settings flow through from the config."""
    source = "  ** GOTO done\n  foo(;\n"
    diagnostics: list[Diagnostic] = [problem(GENERIC_PARSE_MESSAGE, 2, 6)]

    default: RewriteResult = patch_source(source, diagnostics)
    assert default.text == "   break done;\n//foo(;\n"

    only_braces: RewriteResult = patch_source(
        source, diagnostics, config=Config(strategies=("curly_braces",))
    )
    assert only_braces.text == "  ** GOTO done\n//foo(;\n"

    no_pad: RewriteResult = patch_source(
        source, diagnostics, config=Config(pad_shortened_lines=False)
    )
    assert no_pad.text == "  break done;\n//foo(;\n"


def test_parse_with_recovery_skips_recovery_on_success() -> None:
    """A clean first parse is returned without a second pass."""
    first: ParseResult[str] = ParseResult(tree="cu")
    parser = ScriptedParser(first)

    assert parse_with_recovery("class A {}\n", parser) is first
    assert parser.seen == ["class A {}\n"]


def test_parse_with_recovery_runs_exactly_one_pass() -> None:
    """A failed first parse triggers one recovery pass using its diagnostics."""
    first: ParseResult[str] = ParseResult(
        tree=None, diagnostics=(problem(MISSING_TERMINATOR_MESSAGE, 3, 14),)
    )
    second: ParseResult[str] = ParseResult(tree="cu")
    parser = ScriptedParser(first, second)

    result: ParseResult[str] = parse_with_recovery(SOURCE, parser)

    assert result is second
    assert parser.seen == [SOURCE, PATCHED]


def test_parse_result_successful_needs_tree_and_no_problems() -> None:
    """A tree with problems, or no tree at all, is not a success."""
    assert ParseResult(tree="t").successful
    assert not ParseResult(tree=None).successful
    assert not ParseResult(tree="t", diagnostics=(Diagnostic("x"),)).successful
