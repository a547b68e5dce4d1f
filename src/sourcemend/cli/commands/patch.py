# topmark:header:start
#
#   project      : SourceMend
#   file         : patch.py
#   file_relpath : src/sourcemend/cli/commands/patch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SourceMend `patch` command.

Applies one recovery pass to a source file, given the diagnostics its failed
parse produced (as JSON), and prints the result. The parser itself runs outside
SourceMend, so this command stops before the reparse step.

Examples:
  Print the patched source:

    $ sourcemend patch Foo.java -d problems.json

  Show what would change:

    $ sourcemend patch Foo.java -d problems.json --format diff

  Read the source from STDIN and emit a JSON report:

    $ cat Foo.java | sourcemend patch - -d problems.json --format json

Exit status is 0 when nothing was patched and 2 when at least one line was.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from sourcemend.cli.errors import (
    SourcemendConfigError,
    SourcemendEncodingError,
    SourcemendFileNotFoundError,
    SourcemendIOError,
    SourcemendUsageError,
)
from sourcemend.cli.exit_codes import ExitCode
from sourcemend.cli.options import CONTEXT_SETTINGS, recovery_options
from sourcemend.config import Config, MutableConfig
from sourcemend.config.logging import get_logger
from sourcemend.diagnostic.io import parse_diagnostics
from sourcemend.errors import ConfigError, DiagnosticsFormatError, SourceReadError
from sourcemend.recovery.driver import patch_source
from sourcemend.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from sourcemend.cli.console import ClickConsole
    from sourcemend.diagnostic.model import Diagnostic
    from sourcemend.recovery.model import RecoveryReport, RewriteResult

logger = get_logger(__name__)

STDIN_MARKER: str = "-"


class OutputFormat(str, Enum):
    """Output formats of the `patch` command."""

    SOURCE = "source"
    DIFF = "diff"
    JSON = "json"


def _read_input(location: str, *, what: str) -> bytes:
    if location == STDIN_MARKER:
        return click.get_binary_stream("stdin").read()
    path = Path(location)
    try:
        return path.read_bytes()
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise SourcemendFileNotFoundError(f"{what} not found: {location}") from exc
    except OSError as exc:
        raise SourcemendIOError(f"Cannot read {what.lower()} {location}: {exc}") from exc


def _load_config(
    *,
    source: str,
    no_config: bool,
    config_files: tuple[str, ...],
    strategies: tuple[str, ...],
    pad_shortened_lines: bool | None,
) -> Config:
    start: Path | None = None
    if not no_config:
        start = Path.cwd() if source == STDIN_MARKER else Path(source).parent
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            start=start, extra_files=[Path(p) for p in config_files]
        )
    except ConfigError as exc:
        raise SourcemendConfigError(str(exc)) from exc

    overrides = MutableConfig(
        strategies=list(strategies) if strategies else None,
        pad_shortened_lines=pad_shortened_lines,
    )
    return draft.merge_with(overrides).freeze()


def _print_summary(console: ClickConsole, report: RecoveryReport) -> None:
    console.print()
    console.print(f"Patched {len(report)} line(s):")
    for patch in report:
        decision: str = patch.decision.render() if console.enable_color else patch.decision.value
        drift: str = "" if patch.preserves_length else f", offsets drift by {patch.length_delta:+d}"
        console.print(f"  line {patch.number}: {patch.strategy} ({decision}{drift})")


@click.command(
    name="patch",
    help="Patch SOURCE using the diagnostics of its failed parse.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("source", type=str)
@click.option(
    "--diagnostics",
    "-d",
    "diagnostics_file",
    type=str,
    required=True,
    help="JSON file with the parser's diagnostics (use '-' for STDIN).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.SOURCE.value,
    show_default=True,
    help="What to print: the patched source, a unified diff, or a JSON report.",
)
@recovery_options
def patch_command(
    *,
    source: str,
    diagnostics_file: str,
    output_format: str,
    config_files: tuple[str, ...],
    no_config: bool,
    strategies: tuple[str, ...],
    pad_shortened_lines: bool | None,
) -> None:
    """Run one recovery pass over SOURCE and print the outcome."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if source == STDIN_MARKER and diagnostics_file == STDIN_MARKER:
        raise SourcemendUsageError("SOURCE and --diagnostics cannot both be read from STDIN.")

    config: Config = _load_config(
        source=source,
        no_config=no_config,
        config_files=config_files,
        strategies=strategies,
        pad_shortened_lines=pad_shortened_lines,
    )
    for warning in config.warnings:
        console.warn(f"Config: {warning}")

    raw_diagnostics: bytes = _read_input(diagnostics_file, what="Diagnostics file")
    try:
        diagnostics: list[Diagnostic] = parse_diagnostics(raw_diagnostics.decode("utf-8"))
    except (UnicodeDecodeError, DiagnosticsFormatError) as exc:
        raise SourcemendEncodingError(f"Malformed diagnostics: {exc}") from exc

    raw_source: bytes = _read_input(source, what="Source")
    try:
        result: RewriteResult = patch_source(raw_source, diagnostics, config=config)
    except SourceReadError as exc:
        raise SourcemendEncodingError(str(exc)) from exc

    fmt = OutputFormat(output_format)
    name: str = "<stdin>" if source == STDIN_MARKER else source
    if fmt == OutputFormat.SOURCE:
        console.print(result.text, nl=False)
    elif fmt == OutputFormat.DIFF:
        diff: str = unified_diff(raw_source.decode("utf-8"), result.text, name=name)
        if diff:
            console.print(render_patch(diff) if console.enable_color else diff, nl=False)
            _print_summary(console, result.report)
    else:
        payload: dict[str, Any] = {
            "source": name,
            "config": config.to_toml_dict(),
            "report": result.report.to_dict(),
            "patched": result.text,
        }
        console.print(json.dumps(payload, indent=2))

    logger.info("Patched %d line(s) of %s", len(result.report), name)
    if result.report.changed:
        ctx.exit(ExitCode.WOULD_CHANGE)
