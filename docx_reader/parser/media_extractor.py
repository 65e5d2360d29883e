"""Lookups from drawing references to captured media payloads."""
from __future__ import annotations

from typing import Mapping, Optional

from docx_reader.options import ParseOptions
from docx_reader.parser.rels_parser import Relationships
from docx_reader.utils.logger import get_logger

LOGGER = get_logger(__name__)


class MediaResolver:
    """Maps drawing ids and relationship ids to media bytes."""

    def __init__(
        self,
        media: Mapping[str, bytes],
        relationships: Relationships,
        options: Optional[ParseOptions] = None,
    ) -> None:
        self._media = media
        self._relationships = relationships
        self._options = options or ParseOptions()

    def resolve_drawing_id(self, drawing_id: str) -> Optional[bytes]:
        """Return bytes of ``image<id>.png`` for a ``wp:docPr`` id, if captured."""
        name = self._options.legacy_image_name(drawing_id)
        data = self._media.get(name)
        if data is None:
            LOGGER.debug("No media named %s for drawing id %s", name, drawing_id)
        return data

    def resolve_embed(self, r_id: str) -> Optional[bytes]:
        """Return bytes of the media file an ``r:embed`` relationship points at."""
        name = self._relationships.media_name(r_id)
        if name is None:
            LOGGER.debug("Unknown image relationship %s", r_id)
            return None
        data = self._media.get(name)
        if data is None:
            LOGGER.debug("Relationship %s targets missing media %s", r_id, name)
        return data


def sniff_image_type(data: bytes) -> str:
    """Best-effort MIME type from an image's leading signature bytes."""
    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if data.startswith(b"\xff\xd8"):
        return "image/jpeg"
    if data[:6] in (b"GIF87a", b"GIF89a"):
        return "image/gif"
    if data.startswith(b"BM"):
        return "image/bmp"
    return "application/octet-stream"
