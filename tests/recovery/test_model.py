# topmark:header:start
#
#   project      : SourceMend
#   file         : test_model.py
#   file_relpath : tests/recovery/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recovery records: decisions, line patches and the per-pass report."""

from __future__ import annotations

import json

from sourcemend.recovery.model import LinePatch, PatchDecision, RecoveryReport


def _patch(number: int, strategy: str, original: str, patched: str) -> LinePatch:
    return LinePatch(
        number=number,
        strategy=strategy,
        decision=PatchDecision.TEXT_EDIT,
        original=original,
        patched=patched,
    )


def test_patch_decision_values_are_plain_strings() -> None:
    """Members compare equal to their text and serialize as such."""
    assert PatchDecision.LINE_COMMENT == "line comment"
    assert json.dumps(PatchDecision.TEXT_EDIT) == '"text edit"'
    assert "none" in PatchDecision.NONE.render()


def test_line_patch_length_delta() -> None:
    """A grown line reports a positive delta and does not preserve length."""
    grown: LinePatch = _patch(1, "missing_terminator", "int x = 5", "int x = 5;")

    assert grown.length_delta == 1
    assert not grown.preserves_length
    assert grown.to_dict()["decision"] == "text edit"


def test_report_aggregates() -> None:
    """The report counts strategies and lists drifting lines in order."""
    report = RecoveryReport()
    assert not report.changed

    report.add(_patch(2, "decompiler_artifacts", "  ** GOTO a", "  break a;"))
    report.add(_patch(5, "missing_quote", 'f("xy);', 'f("?");'))
    report.add(_patch(9, "decompiler_artifacts", "** case 1:", "   case 1:"))

    assert report.changed
    assert len(report) == 3
    assert report.by_strategy() == {"decompiler_artifacts": 2, "missing_quote": 1}
    assert report.drifting_lines() == [2]
    assert [p["line"] for p in report.to_dict()["patches"]] == [2, 5, 9]
