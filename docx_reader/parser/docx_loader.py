"""DOCX package loader responsible for pulling XML parts and media out of the archive."""
from __future__ import annotations

import io
import posixpath
import zipfile
import zlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Callable, Dict, Iterator, Union

from stream_unzip import UnzipError, stream_unzip

from docx_reader.utils.logger import get_logger

LOGGER = get_logger(__name__)

DOCUMENT_XML_PATH = "word/document.xml"
NUMBERING_XML_PATH = "word/numbering.xml"
DOCUMENT_RELS_PATH = "word/_rels/document.xml.rels"
MEDIA_PREFIX = "word/media/"
READ_CHUNK_SIZE = 64 * 1024

# Structural failures that end extraction early instead of propagating.
_CONTAINER_ERRORS = (
    zipfile.BadZipFile,
    UnzipError,
    zlib.error,
    EOFError,
    OSError,
    NotImplementedError,
    RuntimeError,
)


@dataclass(slots=True)
class DocxPackage:
    """Raw parts captured from a DOCX archive.

    Missing parts are represented by empty byte strings, media is keyed by the
    base file name of each entry under ``word/media/``.
    """

    document_xml: bytes = b""
    numbering_xml: bytes = b""
    document_rels_xml: bytes = b""
    media: Dict[str, bytes] = field(default_factory=dict)

    @classmethod
    def load(cls, docx_path: Union[str, Path]) -> "DocxPackage":
        """Open a DOCX archive from disk and capture its parts."""
        path = Path(docx_path)
        LOGGER.debug("Opening %s", path.name)
        return cls.from_stream(path.open("rb"))

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "DocxPackage":
        """Capture parts from a binary stream, closing it on every exit path.

        A corrupt or truncated archive never raises: entries read before the
        failure are kept and the rest are skipped.
        """
        package = cls()
        with stream:
            try:
                package._capture(stream)
            except _CONTAINER_ERRORS:
                LOGGER.exception(
                    "Error reading DOCX container; kept document=%s numbering=%s rels=%s media=%d",
                    bool(package.document_xml),
                    bool(package.numbering_xml),
                    bool(package.document_rels_xml),
                    len(package.media),
                )
        return package

    @property
    def has_numbering(self) -> bool:
        return bool(self.numbering_xml)

    # ------------------------------------------------------------------
    # Internal helpers
    def _capture(self, stream: BinaryIO) -> None:
        source = _seekable(stream)
        try:
            docx_zip = zipfile.ZipFile(source)
        except zipfile.BadZipFile:
            # No readable central directory (e.g. a truncated download): walk the
            # local entry headers front to back instead.
            LOGGER.warning("Central directory unreadable, scanning entries in archive order")
            source.seek(0)
            self._capture_forward(source)
            return
        with docx_zip:
            for info in docx_zip.infolist():
                if not info.is_dir():
                    self._store(info.filename, lambda info=info: docx_zip.read(info))
        LOGGER.debug("Captured %d media entries", len(self.media))

    def _capture_forward(self, source: BinaryIO) -> None:
        for raw_name, _size, chunks in stream_unzip(_iter_chunks(source)):
            name = raw_name.decode("utf-8", errors="replace")
            if name.endswith("/") or not self._store(name, lambda chunks=chunks: b"".join(chunks)):
                # Every entry has to be drained before the next header can be read.
                for _ in chunks:
                    pass
        LOGGER.debug("Captured %d media entries from local headers", len(self.media))

    def _store(self, name: str, read: Callable[[], bytes]) -> bool:
        """Keep the entry if it is one of the captured parts; ``read`` runs to completion first."""
        if name == DOCUMENT_XML_PATH:
            self.document_xml = read()
        elif name == NUMBERING_XML_PATH:
            self.numbering_xml = read()
        elif name == DOCUMENT_RELS_PATH:
            self.document_rels_xml = read()
        elif name.startswith(MEDIA_PREFIX):
            self.media[posixpath.basename(name)] = read()
        else:
            return False
        return True


def _seekable(stream: BinaryIO) -> BinaryIO:
    """Return ``stream`` itself when it can seek, otherwise an in-memory copy."""
    try:
        if stream.seekable():
            return stream
    except AttributeError:
        pass
    return io.BytesIO(stream.read())


def _iter_chunks(source: BinaryIO, chunk_size: int = READ_CHUNK_SIZE) -> Iterator[bytes]:
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            return
        yield chunk
