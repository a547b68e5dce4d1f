# topmark:header:start
#
#   project      : SourceMend
#   file         : test_io.py
#   file_relpath : tests/diagnostic/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics JSON I/O: accepted document shapes and error reporting."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from sourcemend.diagnostic.io import dump_diagnostics, load_diagnostics, parse_diagnostics
from sourcemend.diagnostic.model import Diagnostic, SourcePosition, SourceSpan
from sourcemend.errors import DiagnosticsFormatError, SourcemendError
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def test_parse_bare_array_with_flat_locations() -> None:
    """A JSON array with `line`/`column` fields yields spanned diagnostics."""
    text = '[{"message": "boom", "line": 3, "column": 7}, {"message": "lexer"}]'

    diagnostics: list[Diagnostic] = parse_diagnostics(text)

    assert diagnostics == [
        Diagnostic("boom", SourceSpan(SourcePosition(3, 7))),
        Diagnostic("lexer"),
    ]


def test_parse_nested_span_and_container_key() -> None:
    """An object with a `problems` array and nested spans is accepted."""
    text = json.dumps(
        {
            "problems": [
                {
                    "message": "boom",
                    "span": {"begin": {"line": 2, "column": 1}, "end": {"line": 2, "column": 4}},
                }
            ]
        }
    )

    [diag] = parse_diagnostics(text)

    assert diag.span == SourceSpan(SourcePosition(2, 1), SourcePosition(2, 4))


def test_parse_diagnostics_key() -> None:
    """`diagnostics` works as the container key too."""
    assert parse_diagnostics('{"diagnostics": []}') == []


def test_column_defaults_to_one() -> None:
    """A flat location without a column starts at column 1."""
    [diag] = parse_diagnostics('[{"message": "m", "line": 9}]')

    assert diag.span is not None
    assert diag.span.begin == SourcePosition(9, 1)


@parametrize(
    "text",
    [
        "not json",
        '{"other": []}',
        '"just a string"',
        "[1, 2]",
        '[{"line": 1}]',
        '[{"message": "m", "line": "one"}]',
        '[{"message": "m", "line": true}]',
        '[{"message": "m", "span": {"end": {"line": 1}}}]',
        '[{"message": "m", "span": {"begin": 5}}]',
    ],
)
def test_malformed_documents_raise(text: str) -> None:
    """Every malformed shape is reported as a DiagnosticsFormatError."""
    with pytest.raises(DiagnosticsFormatError) as excinfo:
        parse_diagnostics(text)

    assert isinstance(excinfo.value, SourcemendError)
    assert isinstance(excinfo.value, ValueError)


def test_dump_and_load_file(tmp_path: Path) -> None:
    """Dumped diagnostics load back from disk with the same content."""
    diagnostics: list[Diagnostic] = [Diagnostic.at("boom", 4, 2), Diagnostic("lexer")]
    path: Path = tmp_path / "problems.json"
    path.write_text(dump_diagnostics(diagnostics), encoding="utf-8")

    assert load_diagnostics(path) == diagnostics


def test_to_dict_uses_nested_span_shape() -> None:
    """Spanned diagnostics serialize their begin position under `span`."""
    assert Diagnostic.at("boom", 4, 2).to_dict() == {
        "message": "boom",
        "span": {"begin": {"line": 4, "column": 2}},
    }
    assert Diagnostic("lexer").to_dict() == {"message": "lexer"}
