# topmark:header:start
#
#   project      : SourceMend
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running SourceMend in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so relative SOURCE paths and config discovery
both resolve against the temporary test directory.
"""

from __future__ import annotations

import json
import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from sourcemend.cli.exit_codes import ExitCode
from sourcemend.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

    from sourcemend.diagnostic.model import Diagnostic


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["patch", "Foo.java", "-d", "problems.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory."""
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def write_case(
    tmp_path: Path,
    source: str,
    diagnostics: list[Diagnostic],
    *,
    name: str = "Foo.java",
) -> tuple[Path, Path]:
    """Write a source file and its diagnostics JSON into `tmp_path`.

    Returns:
        tuple[Path, Path]: ``(source_path, diagnostics_path)``.
    """
    source_path: Path = tmp_path / name
    source_path.write_text(source, encoding="utf-8")
    diagnostics_path: Path = tmp_path / "problems.json"
    diagnostics_path.write_text(json.dumps([d.to_dict() for d in diagnostics]), encoding="utf-8")
    return source_path, diagnostics_path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2).

    Click's own usage errors also exit with 2, so callers should check the
    output as well.
    """
    # WOULD_CHANGE is a *normal* outcome; do not assert on exception.
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert "Usage:" not in result.output, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert a specific SourceMend exit code."""
    assert result.exit_code == code, result.output
