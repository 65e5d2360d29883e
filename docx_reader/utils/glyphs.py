"""Static glyph tables used when turning list level text into markers."""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

DEFAULT_BULLET = "•"

# Private-use code points emitted by Symbol/Wingdings bullets.
SYMBOL_FONT_GLYPHS: Mapping[str, str] = MappingProxyType(
    {
        "\uf0b7": "\u2022",  # bullet
        "\uf0a8": "\u25e6",  # white bullet
        "\uf09f": "\u25aa",  # small black square
        "\uf0d1": "\u2013",  # en dash
    }
)

_PLACEHOLDER_PATTERN = re.compile(r"%\d+")
_HEX_ESCAPE_PATTERN = re.compile(r"&#x([0-9A-Fa-f]{4});")


def map_symbol_glyph(text: str) -> str:
    """Swap a symbol-font glyph for its general purpose equivalent."""
    return SYMBOL_FONT_GLYPHS.get(text, text)


def normalize_level_text(raw: str | None) -> str:
    """Turn a ``w:lvlText`` value into the glyph shown in front of list items."""
    if raw is None:
        return DEFAULT_BULLET
    text = _PLACEHOLDER_PATTERN.sub("", raw)
    text = _HEX_ESCAPE_PATTERN.sub(lambda match: chr(int(match.group(1), 16)), text)
    text = map_symbol_glyph(text)
    return text if text.strip() else DEFAULT_BULLET
