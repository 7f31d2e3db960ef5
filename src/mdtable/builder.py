"""Builder pattern for Table construction.

The TableBuilder collects the header, the alignments and the content rows,
folding the cell lengths of each row into the running column widths as it
goes. Default alignments are the exception: their markers are not folded,
so a narrow column renders its marker at natural length. ``finish()`` checks that a header was supplied, substitutes default
alignments if none were, and returns an immutable Table. A builder can be
finished only once.

Example:
    table = (
        TableBuilder()
        .header(("Name", ["Age", "City"]))
        .row(("Alice", ["30", "NYC"]))
        .row(("Bob", ["7", "LA"]))
        .finish()
    )
    print(table)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from .alignment import Alignment, coerce_alignments
from .exceptions import (
    AlignmentsAlreadySetError,
    BuilderFinishedError,
    ColumnCountMismatchError,
    HeaderAlreadySetError,
    MissingHeaderError,
)
from .row import Row, RowLike, Widths, elementwise_max
from .table import Table

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Row[Any, Any])


class TableBuilder:
    """Fluent builder for constructing a Table.

    All configuration methods return ``self`` for chaining. Rows may be given
    as ``Row`` objects or as ``(label, cells)`` pairs.

    The data-column count is fixed by the ``columns`` argument or, when that
    is omitted, by the first row supplied. Rows of any other width are
    rejected with ``ColumnCountMismatchError``.
    """

    def __init__(self, columns: int | None = None) -> None:
        if columns is not None and columns < 0:
            raise ValueError("columns must be >= 0")
        self._columns = columns
        self._header: Row[Any, Any] | None = None
        self._alignments: Row[Alignment, Alignment] | None = None
        self._default_alignments = False
        self._rows: list[Row[Any, Any]] = []
        self._widths: Widths | None = None if columns is None else Row.zeros(columns)
        self._finished = False

    @classmethod
    def from_rows(
        cls,
        header: RowLike,
        rows: Iterable[RowLike],
        alignments: RowLike | None = None,
    ) -> Table:
        """Build a table in one call (default alignments when none are given)."""
        builder = cls().header(header)
        if alignments is not None:
            builder.alignments(alignments)
        return builder.rows(rows).finish()

    @property
    def columns(self) -> int | None:
        """Data-column count, or None until the first row fixes it."""
        return self._columns

    # -------------------------------------------------------------------------
    # Construction steps
    # -------------------------------------------------------------------------

    def header(self, row: RowLike) -> TableBuilder:
        """Set the header row. May be called once."""
        self._check_open("header")
        if self._header is not None:
            raise HeaderAlreadySetError()
        header = self._accept(Row.of(row), "header")
        self._header = header
        return self

    def alignments(self, row: RowLike) -> TableBuilder:
        """
        Set the column alignments. May be called once.

        Cells may be ``Alignment`` members or marker strings such as ``"---:"``.

        Raises:
            AlignmentsAlreadySetError: If alignments are already set
            AlignmentParseError: If a marker string is unrecognized
        """
        self._check_open("alignments")
        if self._alignments_set:
            raise AlignmentsAlreadySetError()
        self._alignments = self._accept(coerce_alignments(row), "alignments row")
        return self

    def default_alignments(self) -> TableBuilder:
        """
        Use left alignment for the label column and right for the rest.

        If the column count is not known yet the defaults are applied by
        ``finish()``.
        """
        self._check_open("default_alignments")
        if self._alignments_set:
            raise AlignmentsAlreadySetError()
        if self._columns is None:
            self._default_alignments = True
        else:
            self._use_default_alignments()
        return self

    def row(self, row: RowLike) -> TableBuilder:
        """Append a content row."""
        self._check_open("row")
        self._rows.append(self._accept(Row.of(row), "row"))
        return self

    def rows(self, rows: Iterable[RowLike]) -> TableBuilder:
        """Append content rows in iteration order."""
        for row in rows:
            self.row(row)
        return self

    def finish(self) -> Table:
        """
        Produce the finished Table and close the builder.

        Raises:
            MissingHeaderError: If no header was set
            BuilderFinishedError: If the builder was already finished
        """
        self._check_open("finish")
        if self._header is None:
            raise MissingHeaderError()
        if self._alignments is None:
            self._use_default_alignments()

        assert self._alignments is not None
        assert self._widths is not None
        self._finished = True
        table = Table(
            header=self._header,
            alignments=self._alignments,
            rows=tuple(self._rows),
            widths=self._widths,
        )
        self._rows = []
        logger.debug(
            "Finished table: %d columns, %d rows, widths=%s",
            table.columns,
            len(table.rows),
            list(table.widths),
        )
        return table

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    @property
    def _alignments_set(self) -> bool:
        return self._alignments is not None or self._default_alignments

    def _use_default_alignments(self) -> None:
        assert self._columns is not None
        self._alignments = self._accept(
            Alignment.default_row(self._columns), "alignments row", fold=False
        )

    def _check_open(self, operation: str) -> None:
        if self._finished:
            raise BuilderFinishedError(operation)

    def _accept(self, row: R, what: str, fold: bool = True) -> R:
        """Check the row's column count and fold its cell lengths into the widths.

        Default alignments are checked but not folded; their markers may
        overflow narrow columns.
        """
        if self._columns is None:
            self._columns = row.columns
            self._widths = Row.zeros(row.columns)
        elif row.columns != self._columns:
            raise ColumnCountMismatchError(self._columns, row.columns, what=what)

        assert self._widths is not None
        if fold:
            self._widths = elementwise_max(self._widths, row.cell_lengths())
        return row
