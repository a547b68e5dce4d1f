# topmark:header:start
#
#   project      : SourceMend
#   file         : __init__.py
#   file_relpath : src/sourcemend/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser diagnostic primitives.

Design:
    - Diagnostics come from an external parser and are read-only here.
    - Any object implementing `DiagnosticLike` is accepted; `Diagnostic` is the
      concrete type used by the CLI and the tests.
    - `LexicalFailure` wraps span-less lexer diagnostics once their embedded
      location has been extracted.
"""

from __future__ import annotations

from sourcemend.diagnostic.io import dump_diagnostics, load_diagnostics, parse_diagnostics
from sourcemend.diagnostic.model import (
    Diagnostic,
    LexicalFailure,
    LexicalFailuresByLine,
    ProblemsByLine,
    SourcePosition,
    SourceSpan,
)
from sourcemend.diagnostic.types import DiagnosticLike

__all__ = [
    "Diagnostic",
    "DiagnosticLike",
    "LexicalFailure",
    "LexicalFailuresByLine",
    "ProblemsByLine",
    "SourcePosition",
    "SourceSpan",
    "dump_diagnostics",
    "load_diagnostics",
    "parse_diagnostics",
]
