# topmark:header:start
#
#   project      : SourceMend
#   file         : main.py
#   file_relpath : src/sourcemend/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the SourceMend CLI.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import click

from sourcemend.cli.commands.patch import patch_command
from sourcemend.cli.commands.strategies import strategies_command
from sourcemend.cli.commands.version import version_command
from sourcemend.cli.console import ClickConsole
from sourcemend.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from sourcemend.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize logging and the console on the Click context.

    ``SOURCEMEND_LOG_LEVEL`` wins over ``-v``/``-q`` when set.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level: int = resolve_env_log_level() or resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    ctx.obj["color_enabled"] = not no_color
    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="SourceMend: patch source that failed to parse so it parses on a second attempt.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the SourceMend CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'sourcemend patch SOURCE -d DIAGNOSTICS.json'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(patch_command)

cli.add_command(strategies_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
