# topmark:header:start
#
#   project      : SourceMend
#   file         : model.py
#   file_relpath : src/sourcemend/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types for SourceMend.

Sections:
    * SourcePosition / SourceSpan: 1-based locations reported by the parser.
    * Diagnostic: immutable parser problem (message + optional span).
    * LexicalFailure: a span-less diagnostic localized from the line/column
      embedded in its message.
    * ProblemsByLine / LexicalFailuresByLine: line-indexed multi-maps built once
      per recovery pass.

Diagnostics are owned by the external parser's result. The engine only reads
them; any object implementing
[`DiagnosticLike`][sourcemend.diagnostic.types.DiagnosticLike] is accepted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from sourcemend.errors import DiagnosticsFormatError

if TYPE_CHECKING:
    from sourcemend.diagnostic.types import DiagnosticLike


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """A 1-based line/column position."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """A source range. Only ``begin`` is required by the recovery engine."""

    begin: SourcePosition
    end: SourcePosition | None = None


@dataclass(frozen=True)
class Diagnostic:
    """Structured parser problem with a message and an optional span.

    Attributes:
        message (str): The parser's message text, verbatim.
        span (SourceSpan | None): Where the problem starts; ``None`` when the
            lexer aborted before structural parsing could attach a location.
    """

    message: str
    span: SourceSpan | None = None

    @classmethod
    def at(cls, message: str, line: int, column: int = 1) -> Diagnostic:
        """Create a diagnostic whose span begins at ``line``/``column``."""
        return cls(message=message, span=SourceSpan(SourcePosition(line, column)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Diagnostic:
        """Build a diagnostic from a JSON-like mapping.

        Two location shapes are accepted:

        - flat: ``{"message": ..., "line": 3, "column": 7}``
        - nested: ``{"message": ..., "span": {"begin": {"line": 3, "column": 7},
          "end": {...}}}``

        A mapping with neither ``line`` nor ``span`` yields a span-less diagnostic.

        Args:
            data (Mapping[str, Any]): The mapping to convert.

        Returns:
            Diagnostic: The converted diagnostic.

        Raises:
            DiagnosticsFormatError: If the message is missing or a location field
                has the wrong shape.
        """
        message: Any = data.get("message")
        if not isinstance(message, str):
            raise DiagnosticsFormatError(f"Diagnostic without a string 'message': {data!r}")

        if "span" in data and data["span"] is not None:
            span_data: Any = data["span"]
            if not isinstance(span_data, Mapping) or "begin" not in span_data:
                raise DiagnosticsFormatError(f"Malformed 'span' in diagnostic: {span_data!r}")
            begin: SourcePosition = _position_from_dict(span_data["begin"])
            end_data: Any = span_data.get("end")
            end: SourcePosition | None = (
                _position_from_dict(end_data) if end_data is not None else None
            )
            return cls(message=message, span=SourceSpan(begin, end))

        if "line" in data and data["line"] is not None:
            return cls(message=message, span=SourceSpan(_position_from_dict(data)))

        return cls(message=message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping (nested span shape)."""
        result: dict[str, Any] = {"message": self.message}
        if self.span is not None:
            span: dict[str, Any] = {
                "begin": {"line": self.span.begin.line, "column": self.span.begin.column}
            }
            if self.span.end is not None:
                span["end"] = {"line": self.span.end.line, "column": self.span.end.column}
            result["span"] = span
        return result


def _position_from_dict(data: Any) -> SourcePosition:
    if not isinstance(data, Mapping):
        raise DiagnosticsFormatError(f"Malformed position: {data!r}")
    line: Any = data.get("line")
    column: Any = data.get("column", 1)
    # bool is an int subclass; reject it explicitly
    if not isinstance(line, int) or isinstance(line, bool):
        raise DiagnosticsFormatError(f"Position 'line' must be an integer: {data!r}")
    if not isinstance(column, int) or isinstance(column, bool):
        raise DiagnosticsFormatError(f"Position 'column' must be an integer: {data!r}")
    return SourcePosition(line, column)


@dataclass(frozen=True)
class LexicalFailure:
    """A lexer failure localized from the ``line N, column M`` text in its message.

    Attributes:
        diagnostic (DiagnosticLike): The underlying span-less diagnostic.
        line (int): Line extracted from the message.
        column (int): Column extracted from the message.
    """

    diagnostic: DiagnosticLike
    line: int
    column: int

    @property
    def message(self) -> str:
        """Return the underlying diagnostic's message."""
        return self.diagnostic.message


ProblemsByLine: TypeAlias = "dict[int, list[DiagnosticLike]]"
LexicalFailuresByLine: TypeAlias = "dict[int, list[LexicalFailure]]"
