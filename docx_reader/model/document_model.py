"""Aggregate model handed to consumers after a parse."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from docx_reader.model.elements import DocxElement, ImageElement, ListItemElement
from docx_reader.model.numbering_model import ListCounters, ListDefinitions


@dataclass(slots=True)
class ParseResult:
    """Ordered body elements plus the list state needed to render markers.

    Everything except ``list_counters`` is settled once parsing returns. The
    counters are advanced by the marker engine while a consumer walks
    ``elements`` front to back.
    """

    elements: List[DocxElement] = field(default_factory=list)
    list_definitions: ListDefinitions = field(default_factory=dict)
    list_counters: ListCounters = field(default_factory=ListCounters)

    def iter_list_items(self) -> Iterator[ListItemElement]:
        for element in self.elements:
            if isinstance(element, ListItemElement):
                yield element

    def images(self) -> List[bytes]:
        return [element.data for element in self.elements if isinstance(element, ImageElement)]
