"""Render a parse result as plain text."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from docx_reader.model.document_model import ParseResult
from docx_reader.model.elements import (
    DocxElement,
    ImageElement,
    ListItemElement,
    Table,
    TableElement,
    TextElement,
)
from docx_reader.parser.media_extractor import sniff_image_type
from docx_reader.renderer.list_markers import list_marker
from docx_reader.renderer.utils import column_weights, emphasize

LIST_INDENT = "  "
MIN_COLUMN_WIDTH = 3
CELL_SEPARATOR = " | "


class TextRenderer:
    """Walks the elements in order and writes one line per block.

    List markers are computed here, so a result can be rendered only once: the
    second pass would continue numbering where the first one stopped.
    """

    def __init__(self, output_path: Optional[Path] = None, *, width: int = 80, emphasis: bool = False) -> None:
        self._output_path = output_path
        self._width = width
        self._emphasis = emphasis

    def render(self, result: ParseResult) -> str:
        lines: List[str] = []
        for element in result.elements:
            if isinstance(element, ListItemElement):
                marker = list_marker(element, result.list_definitions, result.list_counters)
                indent = LIST_INDENT * max(element.level, 0)
                lines.append(f"{indent}{marker} {self._styled(element)}".rstrip())
            elif isinstance(element, TableElement):
                lines.extend(self._table_lines(element.table))
            else:
                lines.append(self._inline(element))

        text = "\n".join(lines) + "\n" if lines else ""
        if self._output_path is not None:
            self._output_path.write_text(text, encoding="utf-8")
        return text

    def _inline(self, element: DocxElement) -> str:
        if isinstance(element, TextElement):
            return self._styled(element)
        if isinstance(element, ImageElement):
            return f"[image: {len(element.data)} bytes, {sniff_image_type(element.data)}]"
        return ""

    def _styled(self, element: TextElement | ListItemElement) -> str:
        text = element.text.replace("\n", " ")
        return emphasize(text, element.style) if self._emphasis else text

    def _table_lines(self, table: Table) -> Iterable[str]:
        widths = [max(MIN_COLUMN_WIDTH, int(weight * self._width)) for weight in column_weights(table)]
        for row in table.rows:
            cells = []
            for index, cell in enumerate(row.cells):
                content = " ".join(part for part in (self._inline(item) for item in cell.content) if part)
                width = widths[index]
                cells.append(content[:width].ljust(width))
            yield CELL_SEPARATOR.join(cells).rstrip()
