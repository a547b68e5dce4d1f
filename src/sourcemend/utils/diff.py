# topmark:header:start
#
#   project      : SourceMend
#   file         : diff.py
#   file_relpath : src/sourcemend/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs between original and patched source.

`unified_diff` builds the diff text, `render_patch` turns it into a colorized
preview for the CLI.
"""

from __future__ import annotations

import difflib
from collections.abc import Sequence

from yachalk import chalk

from sourcemend.config.logging import get_logger

logger = get_logger(__name__)


def unified_diff(original: str, patched: str, *, name: str = "<source>") -> str:
    """Return a unified diff from ``original`` to ``patched`` (empty if identical).

    Both texts are compared line by line with their line endings normalized, so a
    CRLF source does not show up as changed on every line.
    """
    diff_lines: list[str] = list(
        difflib.unified_diff(
            original.splitlines(),
            patched.splitlines(),
            fromfile=f"{name} (original)",
            tofile=f"{name} (patched)",
            n=3,
            lineterm="",
        )
    )
    logger.trace("Diff lines: %d", len(diff_lines))
    return "\n".join(diff_lines) + "\n" if diff_lines else ""


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a list/sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    lines: list[str] = (
        patch.splitlines(keepends=False) if isinstance(patch, str) else list(patch)
    )

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
