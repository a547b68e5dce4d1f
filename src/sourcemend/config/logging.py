# topmark:header:start
#
#   project      : SourceMend
#   file         : logging.py
#   file_relpath : src/sourcemend/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SourceMend logging: a TRACE level, a typed logger and chalk-colored output.

The recovery engine logs strategy hits at DEBUG and rejected length repairs at
TRACE. Nothing is printed unless the host application (or the CLI) installs a
handler with [`setup_logging`][sourcemend.config.logging.setup_logging].

The level can be forced from the environment with ``SOURCEMEND_LOG_LEVEL``
(a level name such as ``TRACE`` or ``debug``, or a number).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "SOURCEMEND_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class SourcemendLogger(logging.Logger):
    """Logger with an extra `trace` method below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(SourcemendLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity (highest matching threshold wins)."""

    LEVEL_COLORS: tuple[tuple[int, Callable[..., str]], ...] = (
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it according to its level."""
        message: str = super().format(record)
        for threshold, colorize in self.LEVEL_COLORS:
            if record.levelno >= threshold:
                return colorize(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``SOURCEMEND_LOG_LEVEL``, or None if unset or unknown."""
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the root logger.

    Args:
        level (int | None): Level to use. When None, ``SOURCEMEND_LOG_LEVEL`` is
            consulted, falling back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for existing in root.handlers[:]:
        root.removeHandler(existing)

    # stderr only: stdout carries the patched source
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> SourcemendLogger:
    """Return the `SourcemendLogger` registered under ``name``."""
    return cast("SourcemendLogger", logging.getLogger(name))
