# topmark:header:start
#
#   project      : SourceMend
#   file         : colored_enum.py
#   file_relpath : src/sourcemend/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enums that carry a display colorizer.

`ColoredStrEnum` members are plain strings (stable values for JSON reports and
equality checks) with a colorizer attached on the side, so the CLI can render
recovery decisions in color without the engine knowing about terminals.

Example:
    ```python
    from yachalk import chalk

    class Decision(ColoredStrEnum):
        NONE = ("none", chalk.gray)
        TEXT_EDIT = ("text edit", chalk.green)

    Decision.TEXT_EDIT.value              # 'text edit'
    Decision.TEXT_EDIT.render()           # green 'text edit'
    Decision.TEXT_EDIT.render("line 3")   # green 'line 3'
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable compatible with `yachalk.ChalkBuilder.__call__`."""

    def __call__(self, *args: object, sep: str = " ") -> str: ...


class ColoredStrEnum(str, Enum):
    """`str` enum built from ``(text, colorizer)`` pairs; the value is ``text``."""

    colorizer: Colorizer

    def __new__(cls, text: str, colorizer: Colorizer) -> ColoredStrEnum:
        member: ColoredStrEnum = str.__new__(cls, text)
        member._value_ = text
        member.colorizer = colorizer
        return member

    def __str__(self) -> str:
        return str(self.value)

    def render(self, text: str | None = None) -> str:
        """Return ``text`` (the member's own value by default) in the member's color."""
        return self.colorizer(self.value if text is None else text)
