# topmark:header:start
#
#   project      : SourceMend
#   file         : exit_codes.py
#   file_relpath : src/sourcemend/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the SourceMend CLI.

SourceMend follows the BSD `sysexits` convention where practical. The one
deliberate divergence is ``WOULD_CHANGE = 2``: `sourcemend patch` exits with it
when the patched source differs from the input. Click's own usage errors also
exit with 2, so tests must check ``result.exception is None`` to tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SourceMend CLI.

    Attributes:
        SUCCESS: Nothing to patch.
        FAILURE: Generic failure.
        WOULD_CHANGE: Recovery patched at least one line.
        USAGE_ERROR: Invalid flags/arguments (``EX_USAGE``).
        ENCODING_ERROR: Source or diagnostics are not valid UTF-8 / JSON
            (``EX_DATAERR``).
        FILE_NOT_FOUND: Input path does not exist (``EX_NOINPUT``).
        IO_ERROR: I/O error reading a file (``EX_IOERR``).
        CONFIG_ERROR: Malformed configuration (``EX_CONFIG``).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
