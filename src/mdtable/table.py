"""Finished, immutable tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .alignment import Alignment
from .exceptions import ColumnCountMismatchError
from .render import render_row
from .row import Row, Widths


@dataclass(frozen=True)
class Table:
    """
    A finished table, ready to render.

    Build one with ``TableBuilder``. The widths are the running maximum of
    every cell length seen while building, so no header or content cell is
    wider than its column. Default alignment markers are not counted and may
    overflow a narrow column. Tables constructed directly with smaller widths
    still render: oversized cells are emitted at their natural length.

    Example output (default alignments):
        Name  | Age
        ---   | ---:
        Alice |  30
        Bo    |   7

    Attributes:
        header: Label-column title plus one title per data column
        alignments: Alignment of the label column and each data column
        rows: Content rows, in insertion order
        widths: Column widths used for rendering
    """

    header: Row[Any, Any]
    alignments: Row[Alignment, Alignment]
    rows: tuple[Row[Any, Any], ...]
    widths: Widths

    def __post_init__(self) -> None:
        if not isinstance(self.rows, tuple):
            object.__setattr__(self, "rows", tuple(self.rows))
        expected = self.header.columns
        for what, row in (("alignments row", self.alignments), ("widths row", self.widths)):
            if row.columns != expected:
                raise ColumnCountMismatchError(expected, row.columns, what=what)
        for row in self.rows:
            if row.columns != expected:
                raise ColumnCountMismatchError(expected, row.columns)

    @property
    def columns(self) -> int:
        """Number of data columns (N)."""
        return self.header.columns

    def __len__(self) -> int:
        return len(self.rows)

    def lines(self) -> list[str]:
        """Rendered lines: header, alignment markers, then each content row."""
        lines = [
            render_row(self.header, self.widths, self.alignments),
            render_row(self.alignments, self.widths, self.alignments),
        ]
        lines.extend(render_row(row, self.widths, self.alignments) for row in self.rows)
        return lines

    def render(self) -> str:
        """Render the table; every line, including the last, ends with a newline."""
        return "".join(f"{line}\n" for line in self.lines())

    def __str__(self) -> str:
        return self.render()
