# topmark:header:start
#
#   project      : SourceMend
#   file         : model.py
#   file_relpath : src/sourcemend/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot handed to the recovery driver.
    - `MutableConfig`: a mutable builder used while merging defaults, config
      files and CLI overrides; it can be frozen into `Config` and thawed back.

TOML I/O lives in [`sourcemend.config.loaders`][sourcemend.config.loaders].

Example ``sourcemend.toml``:

    ```toml
    [recovery]
    strategies = ["decompiler_artifacts", "missing_quote"]
    pad-shortened-lines = true
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sourcemend.config.keys import Toml
from sourcemend.config.loaders import (
    discover_config_files,
    extract_sourcemend_table,
    load_toml_dict,
)
from sourcemend.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from sourcemend.config.loaders import TomlTable
    from sourcemend.config.logging import SourcemendLogger

logger: SourcemendLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for a recovery pass.

    Attributes:
        strategies (tuple[str, ...] | None): Names of the enabled strategies;
            ``None`` enables all of them. Pipeline order is fixed regardless of
            the order given here.
        pad_shortened_lines (bool): Left-pad text edits that made a line shorter
            so later offsets stay put.
        config_files (tuple[Path, ...]): Config files that contributed values.
        warnings (tuple[str, ...]): Problems found while loading config files.
    """

    strategies: tuple[str, ...] | None = None
    pad_shortened_lines: bool = True
    config_files: tuple[Path, ...] = ()
    warnings: tuple[str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            strategies=list(self.strategies) if self.strategies is not None else None,
            pad_shortened_lines=self.pad_shortened_lines,
            config_files=list(self.config_files),
            warnings=list(self.warnings),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the recovery settings as a TOML-serializable dict."""
        recovery: TomlTable = {Toml.KEY_PAD_SHORTENED_LINES: self.pad_shortened_lines}
        if self.strategies is not None:
            recovery[Toml.KEY_STRATEGIES] = list(self.strategies)
        return {Toml.SECTION_RECOVERY: recovery}


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``None`` fields mean "not set by this layer" so that `merge_with` can tell an
    explicit value from an inherited one.
    """

    strategies: list[str] | None = None
    pad_shortened_lines: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    warnings: list[str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            strategies=tuple(self.strategies) if self.strategies is not None else None,
            pad_shortened_lines=(
                True if self.pad_shortened_lines is None else self.pad_shortened_lines
            ),
            config_files=tuple(self.config_files),
            warnings=tuple(self.warnings),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay ``other`` on top of this builder (``other`` wins where set).

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: This builder, updated in place.
        """
        if other.strategies is not None:
            self.strategies = list(other.strategies)
        if other.pad_shortened_lines is not None:
            self.pad_shortened_lines = other.pad_shortened_lines
        self.config_files.extend(other.config_files)
        self.warnings.extend(other.warnings)
        return self

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str = "<dict>") -> MutableConfig:
        """Build a layer from a SourceMend TOML table.

        Values of the wrong type are skipped and recorded in ``warnings``.

        Args:
            data (TomlTable): The SourceMend table (``sourcemend.toml`` content or
                ``[tool.sourcemend]``).
            source (str): Name of the source, used in warnings.

        Returns:
            MutableConfig: The parsed layer.
        """
        draft = cls()
        recovery: Any = data.get(Toml.SECTION_RECOVERY, {})
        if not isinstance(recovery, dict):
            draft._warn(f"{source}: [{Toml.SECTION_RECOVERY}] must be a table")
            return draft

        strategies: Any = recovery.get(Toml.KEY_STRATEGIES)
        if strategies is not None:
            if isinstance(strategies, list) and all(isinstance(s, str) for s in strategies):
                draft.strategies = list(strategies)
            else:
                draft._warn(f"{source}: '{Toml.KEY_STRATEGIES}' must be a list of strings")

        pad: Any = recovery.get(Toml.KEY_PAD_SHORTENED_LINES)
        if pad is not None:
            if isinstance(pad, bool):
                draft.pad_shortened_lines = pad
            else:
                draft._warn(f"{source}: '{Toml.KEY_PAD_SHORTENED_LINES}' must be a boolean")
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a layer from ``sourcemend.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The layer, or ``None`` when a ``pyproject.toml``
                has no ``[tool.sourcemend]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Loading config file: %s", path)
        table: TomlTable | None = extract_sourcemend_table(path, load_toml_dict(path))
        if table is None:
            return None
        draft: MutableConfig = cls.from_toml_dict(table, source=str(path))
        draft.config_files = [path]
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_files: Iterable[Path] = (),
    ) -> MutableConfig:
        """Merge discovered and explicit config files (later layers win).

        Args:
            start (Path | None): Directory to start discovery from; ``None``
                skips discovery.
            extra_files (Iterable[Path]): Explicit config files, applied last.

        Returns:
            MutableConfig: The merged builder; CLI overrides go on top of it.
        """
        merged = cls()
        paths: list[Path] = discover_config_files(start) if start is not None else []
        paths.extend(extra_files)
        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged.merge_with(layer)
        return merged

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)
