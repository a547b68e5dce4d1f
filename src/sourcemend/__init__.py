# topmark:header:start
#
#   project      : SourceMend
#   file         : __init__.py
#   file_relpath : src/sourcemend/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SourceMend package.

SourceMend patches Java source that failed to parse so that a second parse
succeeds more often. It reads the diagnostics of the failed parse, applies a
small set of line-level heuristics, and keeps the line/column geometry of the
document stable wherever it can. It exposes a typed API and a Click CLI.
"""

from __future__ import annotations

from sourcemend.config import Config, MutableConfig
from sourcemend.diagnostic import Diagnostic, DiagnosticLike, SourcePosition, SourceSpan
from sourcemend.errors import (
    ConfigError,
    DiagnosticsFormatError,
    SourcemendError,
    SourceReadError,
)
from sourcemend.recovery import (
    ParseResult,
    Parser,
    PatchDecision,
    classify,
    parse_with_recovery,
    patch_source,
    recover,
    recover_with_report,
    rewrite,
)

__all__ = [
    "Config",
    "ConfigError",
    "Diagnostic",
    "DiagnosticLike",
    "DiagnosticsFormatError",
    "MutableConfig",
    "ParseResult",
    "Parser",
    "PatchDecision",
    "SourcePosition",
    "SourceReadError",
    "SourceSpan",
    "SourcemendError",
    "classify",
    "parse_with_recovery",
    "patch_source",
    "recover",
    "recover_with_report",
    "rewrite",
]
