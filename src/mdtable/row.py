"""Row model and column-width aggregation.

A row is one label cell plus a fixed number of data cells. The same shape
carries table content, the header, the alignments and the column widths, so
one renderer handles all of them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from .exceptions import ColumnCountMismatchError

L = TypeVar("L")
C = TypeVar("C")


def cell_text(value: Any) -> str:
    """Textual representation of a cell (``str()`` of the value)."""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Row(Generic[L, C]):
    """
    A label cell plus N data cells.

    Indexing with ``row[i]`` addresses the label at 0 and the data cells at
    1..N. ``row.cell(i)`` is 0-based over the data cells only.

    Attributes:
        label: Value of the label column
        cells: Values of the data columns, in order
    """

    label: L
    cells: tuple[C, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.cells, tuple):
            object.__setattr__(self, "cells", tuple(self.cells))

    @classmethod
    def of(cls, value: RowLike) -> Row[Any, Any]:
        """
        Coerce a ``Row`` or a two-item ``(label, cells)`` sequence into a ``Row``.

        Raises:
            TypeError: If value is neither shape
        """
        if isinstance(value, Row):
            return value
        is_pair = isinstance(value, Sequence) and not isinstance(value, (str, bytes))
        if is_pair and len(value) == 2:
            label, cells = value
            if isinstance(cells, (str, bytes)) or not isinstance(cells, Iterable):
                raise TypeError(f"Row cells must be a sequence, got {type(cells).__name__}")
            return cls(label, tuple(cells))
        raise TypeError(f"Expected Row or (label, cells) pair, got {type(value).__name__}")

    @classmethod
    def zeros(cls, columns: int) -> Widths:
        """All-zero widths row, the seed for width aggregation."""
        return Row(0, (0,) * columns)

    @property
    def columns(self) -> int:
        """Number of data cells (N)."""
        return len(self.cells)

    def cell(self, index: int) -> C:
        """Data cell at 0-based ``index``."""
        if not 0 <= index < len(self.cells):
            raise IndexError(f"cell index {index} out of range for {len(self.cells)} columns")
        return self.cells[index]

    def __getitem__(self, index: int) -> L | C:
        if index == 0:
            return self.label
        if not 0 < index <= len(self.cells):
            raise IndexError(f"row index {index} out of range for {len(self.cells)} columns")
        return self.cells[index - 1]

    def __iter__(self) -> Iterator[L | C]:
        yield self.label
        yield from self.cells

    def __len__(self) -> int:
        return len(self.cells) + 1

    def cell_lengths(self) -> Widths:
        """Length of every cell's text, as a widths row of the same shape."""
        return Row(
            len(cell_text(self.label)),
            tuple(len(cell_text(value)) for value in self.cells),
        )


Widths: TypeAlias = Row[int, int]
"""Minimum render width of the label column and each data column."""

RowLike: TypeAlias = "Row[Any, Any] | tuple[Any, Iterable[Any]] | Sequence[Any]"
"""A ``Row`` or a two-item ``(label, cells)`` sequence, as accepted by ``Row.of``."""


def elementwise_max(a: Widths, b: Widths) -> Widths:
    """
    Slot-wise maximum of two widths rows.

    Args:
        a: Widths row
        b: Widths row with the same column count as ``a``

    Returns:
        New widths row holding the larger value of every slot

    Raises:
        ColumnCountMismatchError: If the rows differ in column count
    """
    if a.columns != b.columns:
        raise ColumnCountMismatchError(a.columns, b.columns, what="widths row")
    return Row(
        max(a.label, b.label),
        tuple(max(x, y) for x, y in zip(a.cells, b.cells)),
    )
