# topmark:header:start
#
#   project      : SourceMend
#   file         : version.py
#   file_relpath : src/sourcemend/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SourceMend `version` command.

Prints the SourceMend version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sourcemend.constants import SOURCEMEND_VERSION

if TYPE_CHECKING:
    from sourcemend.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of SourceMend.",
)
def version_command() -> None:
    """Show the current version of SourceMend."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    console.print(SOURCEMEND_VERSION)
