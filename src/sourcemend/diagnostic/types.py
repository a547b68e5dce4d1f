# topmark:header:start
#
#   project      : SourceMend
#   file         : types.py
#   file_relpath : src/sourcemend/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared typing helpers for parser diagnostics.

The recovery engine never constructs parser diagnostics itself; it reads whatever
the external parser produced. `DiagnosticLike` expresses that contract
structurally so adapters for other parsers need not subclass anything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sourcemend.diagnostic.model import SourceSpan


class DiagnosticLike(Protocol):
    """Structural interface for a parser diagnostic."""

    @property
    def message(self) -> str:
        """Human-readable problem description, in the parser's own phrasing."""
        ...

    @property
    def span(self) -> SourceSpan | None:
        """Resolvable source span, or ``None`` when the lexer aborted first."""
        ...
