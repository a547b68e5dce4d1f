# topmark:header:start
#
#   project      : SourceMend
#   file         : model.py
#   file_relpath : src/sourcemend/recovery/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Working records and results of a recovery pass.

Sections:
    * PatchDecision: what a strategy wants done with a line.
    * LineState: the mutable line buffer threaded through the strategy pipeline.
    * LinePatch / RecoveryReport: per-line record of the edits that were applied.
    * RewriteResult: patched text plus its report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from yachalk import chalk

from sourcemend.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterator


class PatchDecision(ColoredStrEnum):
    """Outcome of evaluating one strategy against one line.

    ``TEXT_EDIT`` means the strategy already stored its replacement text in the
    `LineState` it was handed.
    """

    NONE = ("none", chalk.gray)
    LINE_COMMENT = ("line comment", chalk.yellow)
    TEXT_EDIT = ("text edit", chalk.green)


@dataclass
class LineState:
    """A physical line being rewritten.

    Attributes:
        number (int): 1-based line number; never changes.
        text (str): Current text of the line, without its line break.
    """

    number: int
    text: str


@dataclass(frozen=True)
class LinePatch:
    """Record of one line touched by the rewriter.

    Attributes:
        number (int): 1-based line number.
        strategy (str): Name of the strategy that fired.
        decision (PatchDecision): The decision that strategy returned.
        original (str): Line text before recovery.
        patched (str): Line text after recovery and length repair.
    """

    number: int
    strategy: str
    decision: PatchDecision
    original: str
    patched: str

    @property
    def length_delta(self) -> int:
        """Return ``len(patched) - len(original)``; non-zero means later offsets drift."""
        return len(self.patched) - len(self.original)

    @property
    def preserves_length(self) -> bool:
        """Return True if the patched line kept the original length."""
        return self.length_delta == 0

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this record."""
        return {
            "line": self.number,
            "strategy": self.strategy,
            "decision": self.decision.value,
            "original": self.original,
            "patched": self.patched,
            "length_delta": self.length_delta,
        }


@dataclass
class RecoveryReport:
    """Ordered collection of the line patches applied during one pass."""

    patches: list[LinePatch] = field(default_factory=lambda: [])

    def add(self, patch: LinePatch) -> None:
        """Append a line patch."""
        self.patches.append(patch)

    @property
    def changed(self) -> bool:
        """Return True if at least one line was patched."""
        return bool(self.patches)

    def drifting_lines(self) -> list[int]:
        """Return the numbers of patched lines whose length changed."""
        return [p.number for p in self.patches if not p.preserves_length]

    def by_strategy(self) -> dict[str, int]:
        """Return the number of patched lines per strategy name."""
        counts: dict[str, int] = {}
        for p in self.patches:
            counts[p.strategy] = counts.get(p.strategy, 0) + 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this report."""
        return {
            "changed": self.changed,
            "patches": [p.to_dict() for p in self.patches],
            "drifting_lines": self.drifting_lines(),
        }

    def __iter__(self) -> Iterator[LinePatch]:
        return iter(self.patches)

    def __len__(self) -> int:
        return len(self.patches)


@dataclass(frozen=True)
class RewriteResult:
    """Patched source text and the report of how it was produced."""

    text: str
    report: RecoveryReport
