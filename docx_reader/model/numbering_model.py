"""Numbering model captures list definitions and render-time list counters."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from docx_reader.utils.glyphs import DEFAULT_BULLET


class ListFormat:
    """Values of ``w:numFmt`` understood by the marker engine."""

    BULLET = "bullet"
    DECIMAL = "decimal"
    LOWER_LETTER = "lowerLetter"
    UPPER_LETTER = "upperLetter"
    LOWER_ROMAN = "lowerRoman"
    UPPER_ROMAN = "upperRoman"


@dataclass(frozen=True, slots=True)
class ListStyle:
    """Format and marker template for one level of a list."""

    format: str = ListFormat.BULLET
    level_text: str = DEFAULT_BULLET


# list id -> level -> style
ListDefinitions = Dict[int, Dict[int, ListStyle]]

CounterKey = Tuple[int, int]


class ListCounters:
    """Mutable per-(list id, level) counters driven while rendering.

    The store is meant to be driven by a single reader walking list items in
    document order; interleaved or out-of-order queries give undefined numbering.
    """

    def __init__(self) -> None:
        self._counters: Dict[CounterKey, int] = {}

    def next_and_advance(self, list_id: int, level: int) -> int:
        """Return the current value for the key (starting at 1) and bump it."""
        key = (list_id, level)
        current = self._counters.get(key, 1)
        self._counters[key] = current + 1
        return current

    def clear_deeper(self, list_id: int, level: int) -> None:
        """Forget every counter of ``list_id`` nested deeper than ``level``."""
        stale = [key for key in self._counters if key[0] == list_id and key[1] > level]
        for key in stale:
            del self._counters[key]

    def peek(self, list_id: int, level: int) -> int:
        return self._counters.get((list_id, level), 1)

    def snapshot(self) -> Dict[CounterKey, int]:
        return dict(self._counters)

    def __len__(self) -> int:
        return len(self._counters)

    def __repr__(self) -> str:
        return f"ListCounters({self._counters!r})"
