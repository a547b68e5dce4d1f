# topmark:header:start
#
#   project      : SourceMend
#   file         : errors.py
#   file_relpath : src/sourcemend/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SourceMend CLI.

Commands translate engine exceptions (see [`sourcemend.errors`][sourcemend.errors])
into these Click exceptions so that each failure exits with a specific
[`ExitCode`][sourcemend.cli.exit_codes.ExitCode].
"""

from __future__ import annotations

from typing import IO, Any

import click

from sourcemend.cli.exit_codes import ExitCode


class SourcemendCliError(click.ClickException):
    """Base class for all SourceMend CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if one is on the Click context."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = ctx.obj.get("console") if ctx and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class SourcemendUsageError(SourcemendCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SourcemendConfigError(SourcemendCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class SourcemendFileNotFoundError(SourcemendCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SourcemendIOError(SourcemendCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class SourcemendEncodingError(SourcemendCliError):
    """Error for undecodable source text or malformed diagnostics."""

    exit_code = ExitCode.ENCODING_ERROR
