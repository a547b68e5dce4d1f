# topmark:header:start
#
#   project      : SourceMend
#   file         : test_diff_render.py
#   file_relpath : tests/utils/test_diff_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diff utils: unified diff construction and colorized rendering."""

from __future__ import annotations

from sourcemend.utils.diff import render_patch, unified_diff


def test_unified_diff_identical_is_empty() -> None:
    """Identical texts produce no diff at all."""
    assert unified_diff("a\nb\n", "a\nb\n") == ""


def test_unified_diff_ignores_line_ending_convention() -> None:
    """A CRLF original and its LF rewrite are not reported as different."""
    assert unified_diff("a\r\nb\r\n", "a\nb\n") == ""


def test_unified_diff_names_both_sides() -> None:
    """Headers carry the given name; only the changed line is marked."""
    diff: str = unified_diff("x\n    foo(;\ny\n", "x\n//  foo(;\ny\n", name="Foo.java")

    lines: list[str] = diff.splitlines()
    assert lines[:2] == ["--- Foo.java (original)", "+++ Foo.java (patched)"]
    assert "-    foo(;" in lines
    assert "+//  foo(;" in lines
    assert diff.endswith("\n")


def test_render_patch_accepts_str_and_list() -> None:
    """`render_patch` should accept both a diff string and an iterable of lines."""
    diff_text = "--- a\n+++ b\n-foo\n+bar\n"
    s1 = render_patch(diff_text)
    s2 = render_patch(diff_text.splitlines(False))

    assert s1 == s2
    assert "foo" in s1 and "bar" in s1


def test_render_patch_line_numbers() -> None:
    """Line numbers are zero-padded to four digits."""
    rendered: str = render_patch(["@@ -1 +1 @@"], show_line_numbers=True)

    assert rendered.startswith("0001|")


def test_render_patch_empty_input_is_safe() -> None:
    """Empty diff input should not raise and should return an empty string."""
    assert render_patch("") == ""
