"""Render-time list markers.

Markers are produced lazily while a consumer walks the parsed elements, because
numbering depends on every list item rendered before. Call :func:`list_marker`
once per list item, in document order, always with the ``list_definitions`` and
``list_counters`` of the same :class:`~docx_reader.model.document_model.ParseResult`.
"""
from __future__ import annotations

from typing import Callable, Dict

from docx_reader.model.elements import ListItemElement
from docx_reader.model.numbering_model import ListCounters, ListDefinitions, ListFormat, ListStyle
from docx_reader.parser.numbering_parser import lookup_list_style
from docx_reader.utils.glyphs import DEFAULT_BULLET, map_symbol_glyph

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)
MAX_ROMAN = 3999
ALPHABET_SIZE = 26


def to_roman(value: int) -> str:
    """Classical subtractive Roman numeral, or ``""`` outside 1..3999."""
    if value < 1 or value > MAX_ROMAN:
        return ""
    digits = []
    for amount, numeral in _ROMAN_NUMERALS:
        count, value = divmod(value, amount)
        digits.append(numeral * count)
    return "".join(digits)


def to_letters(value: int, upper: bool = False) -> str:
    """Alphabetic counter as Word writes it: a..z, then aa..zz, aaa...

    Past 26 the letter repeats rather than continuing as a plain code point
    offset from ``a``, which would run on into ``{``, ``|`` and beyond.
    """
    if value < 1:
        return ""
    repeat, offset = divmod(value - 1, ALPHABET_SIZE)
    letter = chr(ord("A" if upper else "a") + offset)
    return letter * (repeat + 1)


def bullet_marker(style: ListStyle) -> str:
    glyph = map_symbol_glyph(style.level_text).strip()
    return glyph[0] if glyph else DEFAULT_BULLET


_COUNTED_FORMATS: Dict[str, Callable[[int], str]] = {
    ListFormat.DECIMAL: str,
    ListFormat.LOWER_LETTER: lambda value: to_letters(value),
    ListFormat.UPPER_LETTER: lambda value: to_letters(value, upper=True),
    ListFormat.LOWER_ROMAN: lambda value: to_roman(value).lower(),
    ListFormat.UPPER_ROMAN: to_roman,
}


def format_marker(style: ListStyle, counters: ListCounters, list_id: int, level: int) -> str:
    """Marker text for ``style``; counted formats advance the (list, level) counter."""
    if style.format == ListFormat.BULLET:
        marker = bullet_marker(style)
    elif style.format in _COUNTED_FORMATS:
        marker = f"{_COUNTED_FORMATS[style.format](counters.next_and_advance(list_id, level))}."
    else:
        marker = DEFAULT_BULLET
    counters.clear_deeper(list_id, level)
    return marker


def list_marker(item: ListItemElement, list_definitions: ListDefinitions, counters: ListCounters) -> str:
    """Marker for ``item``.

    Without any numbering definitions, or when the item's list or level is unknown,
    the default bullet is returned and the counters are left alone. Otherwise any
    deeper counters of the same list are reset after the marker is computed.
    """
    if not list_definitions:
        return DEFAULT_BULLET
    style = lookup_list_style(list_definitions, item.list_id, item.level)
    if style is None:
        return DEFAULT_BULLET
    return format_marker(style, counters, item.list_id, item.level)
