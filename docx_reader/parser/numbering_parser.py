"""Parse numbering.xml into per-list level styles."""
from __future__ import annotations

from typing import Dict, Optional

from docx_reader.model.numbering_model import ListDefinitions, ListFormat, ListStyle
from docx_reader.utils.glyphs import normalize_level_text
from docx_reader.utils.logger import get_logger
from docx_reader.utils.xml_utils import NO_VALUE, get_attr, get_int_attr, iter_events, local_name

LOGGER = get_logger(__name__)


class NumberingParser:
    """Single-pass parser for the numbering part.

    Level styles are first collected per abstract definition; a ``w:num`` then
    copies whatever its abstract definition holds *at that point of the stream*.
    Word writes every ``w:abstractNum`` before the ``w:num`` elements, and a
    reference seen before its definition leaves the list id unmapped.
    """

    def __init__(self, numbering_xml: Optional[bytes]) -> None:
        self._numbering_xml = numbering_xml or b""

    def parse(self) -> ListDefinitions:
        definitions: ListDefinitions = {}
        if not self._numbering_xml:
            return definitions

        abstracts: Dict[int, Dict[int, ListStyle]] = {}
        num_id = NO_VALUE
        abstract_id = NO_VALUE
        level = NO_VALUE
        level_format = ListFormat.BULLET
        level_text = normalize_level_text(None)

        for event, element in iter_events(self._numbering_xml):
            tag = local_name(element.tag)
            attrib = element.attrib
            if event == "start":
                if tag == "num":
                    num_id = get_int_attr(attrib, "numId")
                elif tag == "abstractNum":
                    abstract_id = get_int_attr(attrib, "abstractNumId")
                elif tag == "lvl":
                    level = get_int_attr(attrib, "ilvl")
                    level_format = ListFormat.BULLET
                    level_text = normalize_level_text(None)
                elif tag == "numFmt":
                    level_format = get_attr(attrib, "val") or level_format
                elif tag == "lvlText":
                    level_text = normalize_level_text(get_attr(attrib, "val"))
                elif tag == "abstractNumId" and num_id != NO_VALUE:
                    referenced = get_int_attr(attrib, "val")
                    snapshot = abstracts.get(referenced)
                    if snapshot is None:
                        LOGGER.debug("List %d references undefined abstract numbering %d", num_id, referenced)
                    else:
                        definitions[num_id] = dict(snapshot)
            else:
                if tag == "lvl":
                    if abstract_id != NO_VALUE and level != NO_VALUE:
                        abstracts.setdefault(abstract_id, {})[level] = ListStyle(level_format, level_text)
                    level = NO_VALUE
                elif tag == "abstractNum":
                    abstract_id = NO_VALUE
                elif tag == "num":
                    num_id = NO_VALUE

        LOGGER.debug("Resolved %d lists from %d abstract definitions", len(definitions), len(abstracts))
        return definitions


def lookup_list_style(definitions: ListDefinitions, list_id: int, level: int) -> Optional[ListStyle]:
    """Return the style for ``level`` of ``list_id`` or ``None`` when either is unknown."""
    levels = definitions.get(list_id)
    if levels is None:
        return None
    return levels.get(level)
