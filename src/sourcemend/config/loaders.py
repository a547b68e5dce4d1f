# topmark:header:start
#
#   project      : SourceMend
#   file         : loaders.py
#   file_relpath : src/sourcemend/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module reads SourceMend configuration from on-disk TOML files
(``sourcemend.toml`` / ``pyproject.toml``) and walks parent directories to
discover them. Parsing is done with `tomlkit` and returned as plain `dict`
structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from sourcemend.config.keys import Toml
from sourcemend.config.logging import get_logger
from sourcemend.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME
from sourcemend.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from sourcemend.config.logging import SourcemendLogger

logger: SourcemendLogger = get_logger(__name__)

TomlTable: TypeAlias = "dict[str, Any]"


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file into a plain dict.

    Args:
        path (Path): Path to the TOML file.

    Returns:
        TomlTable: The parsed document, unwrapped from tomlkit containers.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    return cast("TomlTable", doc.unwrap())


def extract_sourcemend_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the SourceMend table of a parsed config file.

    ``pyproject.toml`` files contribute their ``[tool.sourcemend]`` table (or
    ``None`` when absent); ``sourcemend.toml`` files are returned as is.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    table: Any = tool.get(Toml.SECTION_SOURCEMEND) if isinstance(tool, dict) else None
    if not isinstance(table, dict):
        logger.debug("No [tool.sourcemend] table in %s", path)
        return None
    return cast("TomlTable", table)


def discover_config_files(start: Path) -> list[Path]:
    """Return config files found walking upward from ``start``.

    Files are returned root-most first, so a later merge lets the nearest file
    win. Within one directory ``pyproject.toml`` comes before
    ``sourcemend.toml``. A table with ``root = true`` stops the walk.

    Args:
        start (Path): Directory (or file) to start from.

    Returns:
        list[Path]: Discovered config files, root-most first.
    """
    anchor: Path = start if start.is_dir() else start.parent
    found: list[Path] = []
    for directory in (anchor.resolve(), *anchor.resolve().parents):
        local: list[Path] = []
        stop: bool = False
        for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
            candidate: Path = directory / name
            if not candidate.is_file():
                continue
            table: TomlTable | None = extract_sourcemend_table(
                candidate, load_toml_dict(candidate)
            )
            if table is None:
                continue
            local.append(candidate)
            stop = stop or table.get(Toml.KEY_ROOT) is True
        found[:0] = local
        if stop:
            break
    logger.debug("Discovered config files: %s", found)
    return found
