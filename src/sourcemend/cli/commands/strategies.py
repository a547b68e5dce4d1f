# topmark:header:start
#
#   project      : SourceMend
#   file         : strategies.py
#   file_relpath : src/sourcemend/cli/commands/strategies.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SourceMend `strategies` command.

Lists the recovery strategies in the order the rewriter evaluates them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sourcemend.cli.options import CONTEXT_SETTINGS
from sourcemend.recovery.strategies import STRATEGIES

if TYPE_CHECKING:
    from sourcemend.cli.console import ClickConsole


@click.command(
    name="strategies",
    help="List recovery strategies in pipeline order.",
    context_settings=CONTEXT_SETTINGS,
)
def strategies_command() -> None:
    """List recovery strategies in pipeline order."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    width: int = max(len(s.name) for s in STRATEGIES)
    for index, strategy in enumerate(STRATEGIES, 1):
        name: str = console.styled(strategy.name.ljust(width), bold=True)
        console.print(f"{index}. {name}  {strategy.summary}")
