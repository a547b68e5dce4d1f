# topmark:header:start
#
#   project      : SourceMend
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SourceMend test suite.

This file sets up global fixtures and the logging configuration for test runs,
and provides small builders for the diagnostics the recovery engine consumes.

Notes:
    Diagnostic messages in these tests follow the phrasing of the upstream Java
    parser exactly; the strategies only fire on that phrasing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from sourcemend.config import logging
from sourcemend.diagnostic.model import Diagnostic

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

# Messages as emitted by the upstream parser
MISSING_TERMINATOR_MESSAGE: str = (
    'Parse error. Found "}", expected one of  "!=" "%" "%=" "&" "&&" "&=" "*" "*=" "+" '
    '"++" "+=" "-" "--" "-=" "->" "." "/" "/=" ";" "<" "<<=" "<=" "=" "==" ">" ">=" '
    '">>=" ">>>=" "?" "^" "^=" "instanceof" "|" "|=" "||"'
)
EXPECTED_CLOSE_BRACE_MESSAGE: str = 'Parse error. Found <EOF>, expected "}"'
EXPECTED_OPEN_BRACE_MESSAGE: str = 'Parse error. Found "int", expected "{"'
GENERIC_PARSE_MESSAGE: str = 'Parse error. Found ")", expected "("'


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def lexical_failure_message(fragment: str, *, line: int, column: int) -> str:
    r"""Build the lexer message for a string literal left open at end of line.

    Args:
        fragment (str): The literal text the lexer consumed, starting with ``"``.
        line (int): 1-based line number.
        column (int): 1-based column number.

    Returns:
        str: e.g. ``Lexical error at line 3, column 14.  Encountered: "\n" (10),
        after : "\"bar);"``.
    """
    escaped: str = fragment.replace('"', '\\"')
    return (
        f'Lexical error at line {line}, column {column}.  Encountered: "\\n" (10), '
        f'after : "{escaped}"'
    )


def problem(message: str, line: int, column: int = 1) -> Diagnostic:
    """Return a structural diagnostic whose span begins at ``line``."""
    return Diagnostic.at(message, line, column)


@pytest.fixture(autouse=True)
def silence_sourcemend_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SOURCEMEND_LOG_LEVEL from the developer's shell does not leak into tests."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log at TRACE level during the test run so caplog sees everything."""
    logging.setup_logging(level=logging.TRACE_LEVEL)
