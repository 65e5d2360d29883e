"""In-memory representation of the parsed document body."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List

from docx_reader.model.style_model import TextStyle


class ElementType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    LIST_ITEM = "list_item"
    NEWLINE = "newline"
    TABLE = "table"


class _Element:
    """Shared surface of every body element."""

    __slots__ = ()

    element_type: ClassVar[ElementType]


@dataclass(slots=True)
class TextElement(_Element):
    """A paragraph's text rendered with the last run style seen in it."""

    element_type: ClassVar[ElementType] = ElementType.TEXT

    text: str
    style: TextStyle = field(default_factory=TextStyle)


@dataclass(slots=True)
class ImageElement(_Element):
    """Raw bytes of an inline picture, exactly as stored in the package."""

    element_type: ClassVar[ElementType] = ElementType.IMAGE

    data: bytes


@dataclass(slots=True)
class ListItemElement(_Element):
    """A numbered or bulleted paragraph.

    The marker is not stored here; it is produced at render time by
    :func:`docx_reader.renderer.list_markers.list_marker`.
    """

    element_type: ClassVar[ElementType] = ElementType.LIST_ITEM

    text: str
    level: int
    list_id: int
    style: TextStyle = field(default_factory=TextStyle)


@dataclass(slots=True)
class NewlineElement(_Element):
    """Vertical gap emitted after a plain paragraph."""

    element_type: ClassVar[ElementType] = ElementType.NEWLINE


@dataclass(slots=True)
class TableCell:
    """Single table cell container.

    ``rowspan`` is a merge flag rather than a span: 1 when the cell restarts a
    vertical merge, otherwise 0.
    """

    content: List["DocxElement"] = field(default_factory=list)
    colspan: int = 1
    rowspan: int = 0

    @property
    def starts_vertical_merge(self) -> bool:
        return self.rowspan == 1


@dataclass(slots=True)
class TableRow:
    """Row with a sequence of cells."""

    cells: List[TableCell] = field(default_factory=list)

    @property
    def span_total(self) -> int:
        return sum(cell.colspan for cell in self.cells)


@dataclass(slots=True)
class Table:
    """Flat table: rows of cells whose content holds body elements."""

    rows: List[TableRow] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return max((len(row.cells) for row in self.rows), default=0)


@dataclass(slots=True)
class TableElement(_Element):
    element_type: ClassVar[ElementType] = ElementType.TABLE

    table: Table


DocxElement = TextElement | ImageElement | ListItemElement | NewlineElement | TableElement
