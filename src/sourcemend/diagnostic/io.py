# topmark:header:start
#
#   project      : SourceMend
#   file         : io.py
#   file_relpath : src/sourcemend/diagnostic/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load parser diagnostics from JSON.

Used by the CLI, where the parser runs out of process and hands its problem list
over as a JSON document. Two document shapes are accepted: a bare array of
diagnostic objects, or an object with a ``"problems"`` (or ``"diagnostics"``)
array.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sourcemend.config.logging import get_logger
from sourcemend.diagnostic.model import Diagnostic
from sourcemend.errors import DiagnosticsFormatError

if TYPE_CHECKING:
    from pathlib import Path

    from sourcemend.config.logging import SourcemendLogger

logger: SourcemendLogger = get_logger(__name__)

_CONTAINER_KEYS: tuple[str, ...] = ("problems", "diagnostics")


def parse_diagnostics(text: str) -> list[Diagnostic]:
    """Parse a JSON diagnostics document.

    Args:
        text (str): The JSON document.

    Returns:
        list[Diagnostic]: The diagnostics in document order.

    Raises:
        DiagnosticsFormatError: If the text is not valid JSON or has an
            unexpected shape.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DiagnosticsFormatError(f"Invalid diagnostics JSON: {exc}") from exc

    if isinstance(data, Mapping):
        for key in _CONTAINER_KEYS:
            if key in data:
                data = data[key]
                break
        else:
            raise DiagnosticsFormatError(
                f"Diagnostics object needs one of the keys: {', '.join(_CONTAINER_KEYS)}"
            )

    if not isinstance(data, list):
        raise DiagnosticsFormatError("Diagnostics document must be a JSON array")

    diagnostics: list[Diagnostic] = []
    for item in data:
        if not isinstance(item, Mapping):
            raise DiagnosticsFormatError(f"Diagnostic entry must be an object: {item!r}")
        diagnostics.append(Diagnostic.from_dict(item))
    logger.debug("Loaded %d diagnostic(s)", len(diagnostics))
    return diagnostics


def load_diagnostics(path: Path) -> list[Diagnostic]:
    """Read and parse a JSON diagnostics file (UTF-8)."""
    return parse_diagnostics(path.read_text(encoding="utf-8"))


def dump_diagnostics(diagnostics: list[Diagnostic]) -> str:
    """Serialize diagnostics to a JSON array (nested span shape)."""
    return json.dumps([d.to_dict() for d in diagnostics], indent=2)
