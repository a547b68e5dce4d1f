# topmark:header:start
#
#   project      : SourceMend
#   file         : console.py
#   file_relpath : src/sourcemend/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for user-facing program output.

Patched source, diffs and reports go through the console; engine diagnostics go
through `logging`. Both end up on different streams, so ``sourcemend patch FILE >
out.java`` never mixes log lines into the patched output.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Program-output console writing through `click.echo`.

    Attributes:
        enable_color (bool): Whether ANSI styling is emitted.
        out (TextIO): Program output stream; `sys.stdout` at construction time.
        err (TextIO): Warning and error stream; `sys.stderr` at construction time.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def _echo(self, stream: TextIO, text: str, nl: bool, **style: Any) -> None:
        if style and self.enable_color:
            text = click.style(text, **style)
        click.echo(text, nl=nl, file=stream, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write program output (patched source, diff, report) to `out`."""
        self._echo(self.out, text, nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a yellow warning to `err`."""
        self._echo(self.err, text, nl, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a red error to `err`."""
        self._echo(self.err, text, nl, fg="bright_red")

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off."""
        return click.style(text, **style) if self.enable_color else text
