# topmark:header:start
#
#   project      : SourceMend
#   file         : options.py
#   file_relpath : src/sourcemend/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, recovery settings)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from sourcemend.cli.errors import SourcemendUsageError
from sourcemend.config.logging import TRACE_LEVEL
from sourcemend.recovery.strategies import STRATEGY_NAMES

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the number of ``-v`` and ``-q`` flags.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        SourcemendUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SourcemendUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat up to three times for TRACE output.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress warnings; only errors are logged.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)


def recovery_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the recovery settings that override configuration files."""
    f = click.option(
        "--config",
        "-c",
        "config_files",
        type=click.Path(dir_okay=False, path_type=str),
        multiple=True,
        help="Extra config file(s) (sourcemend.toml or pyproject.toml), applied last.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Do not discover config files from the source's directory upwards.",
    )(f)
    f = click.option(
        "--strategy",
        "-s",
        "strategies",
        type=click.Choice(STRATEGY_NAMES),
        multiple=True,
        help="Enable only these strategies (repeatable). Pipeline order is fixed.",
    )(f)
    f = click.option(
        "--pad/--no-pad",
        "pad_shortened_lines",
        default=None,
        help="Left-pad edits that shortened a line, keeping later offsets stable.",
    )(f)
    return f
