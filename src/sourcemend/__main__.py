# topmark:header:start
#
#   project      : SourceMend
#   file         : __main__.py
#   file_relpath : src/sourcemend/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SourceMend via ``python -m sourcemend``.

Equivalent to the ``sourcemend`` console script.

Examples:
    Patch a file using the diagnostics of its failed parse::

        python -m sourcemend patch Foo.java -d problems.json
"""

from __future__ import annotations

from sourcemend.cli.main import cli

if __name__ == "__main__":
    cli()
