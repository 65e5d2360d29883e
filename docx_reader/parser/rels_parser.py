"""Utilities for reading the main document's relationship part."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from docx_reader.utils.logger import get_logger
from docx_reader.utils.xml_utils import get_attr, iter_events, local_name

LOGGER = get_logger(__name__)

MEDIA_SEGMENT = "media/"


@dataclass(frozen=True, slots=True)
class Relationship:
    """Represents a single OPC relationship."""

    r_id: str
    target: str

    @property
    def media_name(self) -> str:
        """Target text following the first ``media/`` segment, or the whole target."""
        _, found, tail = self.target.partition(MEDIA_SEGMENT)
        return tail if found else self.target


class Relationships:
    """Relationship id lookups for ``word/_rels/document.xml.rels``."""

    def __init__(self, relationships: Dict[str, Relationship]) -> None:
        self._by_id = relationships

    @classmethod
    def from_xml(cls, data: bytes) -> "Relationships":
        """Stream the relationship part; entries without ``Id`` or ``Target`` are skipped."""
        by_id: Dict[str, Relationship] = {}
        if not data:
            return cls(by_id)

        for event, element in iter_events(data):
            if event != "start" or local_name(element.tag) != "Relationship":
                continue
            r_id = get_attr(element.attrib, "Id")
            target = get_attr(element.attrib, "Target")
            if r_id is None or target is None:
                LOGGER.debug("Skipping relationship without Id or Target: %s", dict(element.attrib))
                continue
            by_id[r_id] = Relationship(r_id=r_id, target=target)
        return cls(by_id)

    def media_name(self, r_id: str) -> Optional[str]:
        rel = self._by_id.get(r_id)
        return rel.media_name if rel else None

    def media_names(self) -> Dict[str, str]:
        """Map every relationship id to the media file name it points at."""
        return {r_id: rel.media_name for r_id, rel in self._by_id.items()}

    def __len__(self) -> int:
        return len(self._by_id)
