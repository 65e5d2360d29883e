"""Helper functions to work with XML namespaces and pull parsing."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Optional, Tuple
from xml.etree import ElementTree as ET

DEFAULT_CHUNK_SIZE = 64 * 1024

# Sentinel used for absent or unreadable ids and levels.
NO_VALUE = -1


@dataclass(frozen=True)
class Namespaces:
    """Common OpenXML namespace prefixes used across parsers."""

    WORD: Dict[str, str] = None  # type: ignore[assignment]
    DRAWING: Dict[str, str] = None  # type: ignore[assignment]
    OFFICE_RELS: Dict[str, str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:  # pragma: no cover
        raise RuntimeError("Namespaces should not be instantiated")


Namespaces.WORD = {  # type: ignore[attr-defined]
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
}
Namespaces.DRAWING = {  # type: ignore[attr-defined]
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "wp": "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing",
}
Namespaces.OFFICE_RELS = {  # type: ignore[attr-defined]
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
}


def split_tag(tag: str) -> Tuple[str, str]:
    """Return ``(namespace, local_name)`` for a Clark-notation tag."""
    if tag.startswith("{"):
        namespace, local = tag[1:].split("}", 1)
        return namespace, local
    return "", tag


def local_name(tag: str) -> str:
    return tag.split("}", 1)[-1]


def get_attr(attrib: Mapping[str, str], name: str, namespace: Optional[str] = None) -> Optional[str]:
    """Look up an attribute by local name.

    When ``namespace`` is given only that qualified attribute matches. Otherwise the
    unqualified attribute wins, followed by the first attribute in any namespace with
    the same local name, which mirrors how WordprocessingML producers are lenient
    about prefixing attributes such as ``w:val``.
    """
    if namespace is not None:
        return attrib.get(f"{{{namespace}}}{name}")
    if name in attrib:
        return attrib[name]
    for key, value in attrib.items():
        if key.startswith("{") and local_name(key) == name:
            return value
    return None


def get_int_attr(attrib: Mapping[str, str], name: str, default: int = NO_VALUE) -> int:
    value = get_attr(attrib, name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def iter_events(data: bytes, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[Tuple[str, ET.Element]]:
    """Yield ``(event, element)`` pairs for ``start`` and ``end`` events.

    The payload is fed to an :class:`xml.etree.ElementTree.XMLPullParser` in chunks so
    that consumers see events in document order without building the whole tree first.
    Syntax errors surface as :class:`xml.etree.ElementTree.ParseError`.
    """
    parser = ET.XMLPullParser(events=("start", "end"))
    for offset in range(0, len(data), chunk_size):
        parser.feed(data[offset : offset + chunk_size])
        yield from parser.read_events()
    parser.close()
    yield from parser.read_events()
