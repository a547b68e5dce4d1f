# topmark:header:start
#
#   project      : SourceMend
#   file         : __init__.py
#   file_relpath : src/sourcemend/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for SourceMend.

Settings come from, in increasing precedence: built-in defaults, discovered
``pyproject.toml`` / ``sourcemend.toml`` files, explicit ``--config`` files, and
CLI flags. They are merged on a `MutableConfig` and frozen into a `Config`.
"""

from __future__ import annotations

from sourcemend.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
