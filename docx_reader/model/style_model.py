"""Run-level text style captured while walking the document body."""
from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_FONT_SIZE = 14.0


@dataclass(frozen=True, slots=True)
class TextStyle:
    """Inline formatting applied to a paragraph's text.

    ``font_size`` is already expressed in display units (half points halved and
    multiplied by the display scale).
    """

    font_size: float = DEFAULT_FONT_SIZE
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def with_changes(self, **changes: object) -> "TextStyle":
        return replace(self, **changes)
