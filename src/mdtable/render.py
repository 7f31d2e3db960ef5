"""
Single-line table rendering.

Every line of a table (header, marker line, content) goes through
``render_row`` with the table's widths and alignments.
"""

from __future__ import annotations

from typing import Any

from .alignment import Alignment
from .exceptions import ColumnCountMismatchError
from .row import Row, Widths, cell_text

SEPARATOR = " | "
"""Text placed before every data cell."""


def pad(text: str, width: int, alignment: Alignment) -> str:
    """
    Pad text to ``width`` according to ``alignment``.

    Centered text gets the odd leftover space on the trailing side. Text
    longer than ``width`` is returned unchanged, never truncated.

    Args:
        text: Cell text
        width: Minimum result length
        alignment: Where the text sits within the padded cell

    Returns:
        Text of length ``max(len(text), width)``
    """
    fill = width - len(text)
    if fill <= 0:
        return text
    if alignment is Alignment.RIGHT:
        return " " * fill + text
    if alignment is Alignment.CENTER:
        before = fill // 2
        return " " * before + text + " " * (fill - before)
    return text + " " * fill


def render_row(
    row: Row[Any, Any],
    widths: Widths,
    alignments: Row[Alignment, Alignment],
) -> str:
    """
    Render one row as a line of text (no trailing newline).

    Args:
        row: Header, alignments or content row
        widths: Column widths of the table
        alignments: Column alignments of the table

    Returns:
        Padded label followed by ``SEPARATOR`` and the padded cell, per column

    Raises:
        ColumnCountMismatchError: If the three rows differ in column count
    """
    if widths.columns != row.columns:
        raise ColumnCountMismatchError(row.columns, widths.columns, what="widths row")
    if alignments.columns != row.columns:
        raise ColumnCountMismatchError(row.columns, alignments.columns, what="alignments row")

    parts = [pad(cell_text(row.label), widths.label, alignments.label)]
    for value, width, alignment in zip(row.cells, widths.cells, alignments.cells):
        parts.append(SEPARATOR)
        parts.append(pad(cell_text(value), width, alignment))
    return "".join(parts)
