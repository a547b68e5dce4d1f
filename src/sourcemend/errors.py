# topmark:header:start
#
#   project      : SourceMend
#   file         : errors.py
#   file_relpath : src/sourcemend/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the SourceMend engine.

Only genuinely unexpected conditions raise. Expected outcomes of a recovery pass
(no strategy applies, a diagnostic cannot be localized, a length repair is
rejected) are represented as values, never as exceptions.

The CLI maps these exceptions to Click errors and exit codes in
[`sourcemend.cli.errors`][sourcemend.cli.errors].
"""

from __future__ import annotations


class SourcemendError(Exception):
    """Base class for all SourceMend engine errors."""


class SourceReadError(SourcemendError):
    """The source text could not be consumed as a stream of lines."""


class DiagnosticsFormatError(SourcemendError, ValueError):
    """A serialized diagnostics document is malformed."""


class ConfigError(SourcemendError):
    """A configuration file is missing, unreadable, or malformed."""
