"""Common helpers shared by renderer implementations."""
from __future__ import annotations

from typing import List

from docx_reader.model.elements import Table
from docx_reader.model.style_model import TextStyle


def column_weights(table: Table) -> List[float]:
    """Relative width of each column position, weighted by colspan.

    Each cell contributes ``colspan / total colspan of its row`` to its position;
    a column keeps the largest contribution seen in any row.
    """
    weights = [0.0] * table.column_count
    for row in table.rows:
        span_total = row.span_total
        if not span_total:
            continue
        for index, cell in enumerate(row.cells):
            weights[index] = max(weights[index], cell.colspan / span_total)
    return weights


def emphasize(text: str, style: TextStyle) -> str:
    """Wrap text in lightweight markup for bold, italic and underline."""
    if not text:
        return text
    if style.underline:
        text = f"__{text}__"
    if style.italic:
        text = f"*{text}*"
    if style.bold:
        text = f"**{text}**"
    return text
