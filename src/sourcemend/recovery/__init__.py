# topmark:header:start
#
#   project      : SourceMend
#   file         : __init__.py
#   file_relpath : src/sourcemend/recovery/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source recovery engine.

Data flows one way::

    diagnostics --classifier--> (problems, lexical_failures)
    source + maps --rewriter(strategies)--> patched text
    patched text --driver--> external parser (second and final attempt)
"""

from __future__ import annotations

from sourcemend.recovery.classifier import classify, locate_lexical_failure
from sourcemend.recovery.driver import (
    Parser,
    ParseResult,
    RecoveryOutcome,
    parse_with_recovery,
    patch_source,
    recover,
    recover_with_report,
)
from sourcemend.recovery.model import (
    LinePatch,
    LineState,
    PatchDecision,
    RecoveryReport,
    RewriteResult,
)
from sourcemend.recovery.rewriter import rewrite, rewrite_text
from sourcemend.recovery.strategies import (
    STRATEGIES,
    STRATEGY_NAMES,
    Strategy,
    run_strategies,
    select_strategies,
)

__all__ = [
    "STRATEGIES",
    "STRATEGY_NAMES",
    "LinePatch",
    "LineState",
    "ParseResult",
    "Parser",
    "PatchDecision",
    "RecoveryOutcome",
    "RecoveryReport",
    "RewriteResult",
    "Strategy",
    "classify",
    "locate_lexical_failure",
    "parse_with_recovery",
    "patch_source",
    "recover",
    "recover_with_report",
    "rewrite",
    "rewrite_text",
    "run_strategies",
    "select_strategies",
]
