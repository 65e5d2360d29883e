"""Walk document.xml once and flatten it into body elements."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional
from xml.etree import ElementTree as ET

from docx_reader.model.elements import (
    DocxElement,
    ImageElement,
    ListItemElement,
    NewlineElement,
    Table,
    TableCell,
    TableElement,
    TableRow,
    TextElement,
)
from docx_reader.model.style_model import TextStyle
from docx_reader.options import ParseOptions
from docx_reader.parser.media_extractor import MediaResolver
from docx_reader.utils.logger import get_logger
from docx_reader.utils.units import half_points_to_display
from docx_reader.utils.xml_utils import (
    NO_VALUE,
    Namespaces,
    get_attr,
    get_int_attr,
    iter_events,
    split_tag,
)

LOGGER = get_logger(__name__)

WORD_NS = Namespaces.WORD["w"]
DRAWING_NS = Namespaces.DRAWING["a"]
WP_NS = Namespaces.DRAWING["wp"]
REL_NS = Namespaces.OFFICE_RELS["r"]

VMERGE_RESTART = "restart"


@dataclass(slots=True)
class WalkState:
    """Everything the walk carries from one tag to the next."""

    elements: List[DocxElement] = field(default_factory=list)
    text: List[str] = field(default_factory=list)
    style: TextStyle = field(default_factory=TextStyle)
    # Style being collected while inside w:rPr, None outside of it.
    pending_style: Optional[TextStyle] = None
    in_numbering: bool = False
    list_level: int = NO_VALUE
    list_id: int = NO_VALUE
    previous_list_id: int = NO_VALUE
    list_transitions: int = 0
    table: Optional[Table] = None
    row: Optional[TableRow] = None
    cell: Optional[TableCell] = None
    cell_content: List[DocxElement] = field(default_factory=list)
    table_depth: int = 0
    run_depth: int = 0
    drawing_id: str = ""
    embed_id: str = ""

    @property
    def in_list(self) -> bool:
        return self.list_level != NO_VALUE and self.list_id != NO_VALUE

    @property
    def in_outer_table(self) -> bool:
        return self.table_depth == 1

    def paragraph_text(self) -> str:
        return "".join(self.text)


class DocumentParser:
    """Transforms Word body XML into a flat list of model elements.

    Only one level of table nesting is modelled. Tables found inside a cell are
    flattened: their paragraphs become content of the enclosing cell. Pictures
    always go to the body list, so one found in a cell precedes its table.
    """

    def __init__(self, media: MediaResolver, options: Optional[ParseOptions] = None) -> None:
        self._media = media
        self._options = options or ParseOptions()

    def parse(self, document_xml: bytes) -> List[DocxElement]:
        """Parse the document body into elements, in document order."""
        state = WalkState()
        if not document_xml:
            LOGGER.warning("document.xml missing or empty")
            return state.elements

        for event, element in iter_events(document_xml):
            if event == "start":
                self._handle_start(state, element)
            else:
                self._handle_end(state, element)

        LOGGER.debug(
            "Parsed %d body elements (%d list switches)", len(state.elements), state.list_transitions
        )
        return state.elements

    # ------------------------------------------------------------------
    # Event handlers
    def _handle_start(self, state: WalkState, element: ET.Element) -> None:
        namespace, tag = split_tag(element.tag)
        attrib = element.attrib

        if state.pending_style is not None:
            if namespace == WORD_NS:
                state.pending_style = self._apply_run_property(state.pending_style, tag, attrib)
            return

        if namespace == WP_NS:
            if tag == "docPr":
                state.drawing_id = get_attr(attrib, "id") or ""
            return
        if namespace == DRAWING_NS:
            if tag == "blip":
                state.embed_id = get_attr(attrib, "embed", REL_NS) or ""
            return
        if namespace != WORD_NS:
            return

        if tag == "tbl":
            state.table_depth += 1
            if state.in_outer_table:
                state.table = Table()
            else:
                LOGGER.warning("Nested table at depth %d flattened into its cell", state.table_depth)
        elif tag == "tr":
            if state.in_outer_table:
                state.row = TableRow()
        elif tag == "tc":
            if state.in_outer_table:
                state.cell_content = []
                state.cell = TableCell(
                    colspan=self._read_colspan(attrib),
                    rowspan=self._read_merge_flag(get_attr(attrib, "vMerge")),
                )
        elif tag == "gridSpan":
            if state.in_outer_table and state.cell is not None:
                state.cell.colspan = self._read_colspan(attrib, "val")
        elif tag == "vMerge":
            if state.in_outer_table and state.cell is not None:
                state.cell.rowspan = self._read_merge_flag(get_attr(attrib, "val"))
        elif tag == "rPr":
            state.pending_style = TextStyle()
        elif tag == "p":
            state.text.clear()
            state.style = TextStyle()
        elif tag == "r":
            state.run_depth += 1
        # Tab stops under w:pPr/w:tabs share the w:tab name; only run content is text.
        elif tag == "br":
            if state.run_depth:
                state.text.append("\n")
        elif tag == "tab":
            if state.run_depth:
                state.text.append("\t")
        elif tag == "numPr":
            state.in_numbering = True
        elif tag == "ilvl":
            if state.in_numbering:
                state.list_level = get_int_attr(attrib, "val", default=0)
        elif tag == "numId":
            if state.in_numbering:
                state.list_id = get_int_attr(attrib, "val")

    def _handle_end(self, state: WalkState, element: ET.Element) -> None:
        namespace, tag = split_tag(element.tag)

        if state.pending_style is not None:
            if namespace == WORD_NS and tag == "rPr":
                state.style = state.pending_style
                state.pending_style = None
            return
        if namespace != WORD_NS:
            return

        if tag == "t":
            state.text.append(element.text or "")
        elif tag == "tc":
            if state.in_outer_table and state.cell is not None:
                state.cell.content = state.cell_content
                if state.row is not None:
                    state.row.cells.append(state.cell)
                state.cell = None
                state.cell_content = []
        elif tag == "tr":
            if state.in_outer_table and state.row is not None:
                if state.table is not None:
                    state.table.rows.append(state.row)
                state.row = None
        elif tag == "tbl":
            if state.in_outer_table and state.table is not None:
                state.elements.append(TableElement(state.table))
                state.table = None
                element.clear()
            state.table_depth = max(state.table_depth - 1, 0)
        elif tag == "p":
            self._finish_paragraph(state)
            element.clear()
        elif tag == "r":
            self._finish_run(state)
            state.run_depth = max(state.run_depth - 1, 0)
        elif tag == "numPr":
            state.in_numbering = False

    # ------------------------------------------------------------------
    # Boundary rules
    def _finish_paragraph(self, state: WalkState) -> None:
        raw_text = state.paragraph_text()
        text = raw_text.strip()
        if state.cell is not None:
            if text:
                state.cell_content.append(TextElement(text, state.style))
        elif state.in_list:
            if state.list_id != state.previous_list_id:
                LOGGER.debug("List changed from %d to %d", state.previous_list_id, state.list_id)
                state.previous_list_id = state.list_id
                state.list_transitions += 1
            state.elements.append(ListItemElement(text, state.list_level, state.list_id, state.style))
        elif raw_text:
            state.elements.append(TextElement(text, state.style))
            state.elements.append(NewlineElement())

        state.text.clear()
        state.list_level = NO_VALUE
        state.list_id = NO_VALUE

    def _finish_run(self, state: WalkState) -> None:
        if state.drawing_id:
            data = self._media.resolve_drawing_id(state.drawing_id)
            if data is not None:
                state.elements.append(ImageElement(data))
            state.drawing_id = ""

        if state.embed_id:
            data = self._media.resolve_embed(state.embed_id)
            if data is not None:
                state.elements.append(ImageElement(data))
            state.embed_id = ""

    # ------------------------------------------------------------------
    # Attribute helpers
    def _apply_run_property(self, style: TextStyle, tag: str, attrib) -> TextStyle:
        # b/i/u count as set whenever present, even with w:val="0".
        if tag == "sz":
            half_points = self._read_half_points(get_attr(attrib, "val"))
            return style.with_changes(
                font_size=half_points_to_display(half_points, self._options.display_scale)
            )
        if tag == "b":
            return style.with_changes(bold=True)
        if tag == "i":
            return style.with_changes(italic=True)
        if tag == "u":
            return style.with_changes(underline=True)
        return style

    def _read_half_points(self, value: Optional[str]) -> float:
        if value is None:
            return self._options.default_half_points
        try:
            half_points = float(value)
        except ValueError:
            return self._options.default_half_points
        return half_points if math.isfinite(half_points) else self._options.default_half_points

    @staticmethod
    def _read_colspan(attrib, name: str = "gridSpan") -> int:
        span = get_int_attr(attrib, name, default=1)
        return span if span >= 1 else 1

    @staticmethod
    def _read_merge_flag(value: Optional[str]) -> int:
        return 1 if value == VMERGE_RESTART else 0
