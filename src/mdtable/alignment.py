"""Column alignment and its marker notation."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .exceptions import AlignmentParseError
from .row import Row, RowLike

_MISSING: Any = object()


class Alignment(Enum):
    """Text alignment of a column. Values are the canonical markers."""

    LEFT = "---"
    CENTER = ":---:"
    RIGHT = "---:"

    @classmethod
    def parse(cls, marker: str, default: Alignment = _MISSING) -> Alignment:
        """
        Parse an alignment marker.

        ``"---"`` and ``":---"`` both mean left alignment, ``":---:"`` center
        and ``"---:"`` right. Nothing else is accepted, not even the same
        markers with surrounding whitespace.

        Args:
            marker: Marker text
            default: Returned for an unrecognized marker instead of raising

        Returns:
            The parsed alignment

        Raises:
            AlignmentParseError: If marker is unrecognized and no default is given
        """
        try:
            return _MARKERS[marker]
        except (KeyError, TypeError):
            if default is not _MISSING:
                return default
            raise AlignmentParseError(marker) from None

    @property
    def marker(self) -> str:
        """Canonical marker (left is always ``"---"``)."""
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default_row(cls, columns: int) -> Row[Alignment, Alignment]:
        """Default alignments: label column left, every data column right."""
        return Row(DEFAULT_LABEL_ALIGNMENT, (DEFAULT_COLUMN_ALIGNMENT,) * columns)


_MARKERS = {
    "---": Alignment.LEFT,
    ":---": Alignment.LEFT,
    ":---:": Alignment.CENTER,
    "---:": Alignment.RIGHT,
}

DEFAULT_LABEL_ALIGNMENT = Alignment.LEFT
"""Alignment of the label column when none is supplied."""

DEFAULT_COLUMN_ALIGNMENT = Alignment.RIGHT
"""Alignment of every data column when none is supplied."""


def coerce_alignments(value: RowLike) -> Row[Alignment, Alignment]:
    """
    Coerce an alignments row whose cells may be ``Alignment`` or marker text.

    Raises:
        AlignmentParseError: If a marker string is unrecognized
        TypeError: If a cell is neither an Alignment nor a string
    """
    row = Row.of(value)
    return Row(_coerce(row.label), tuple(_coerce(cell) for cell in row.cells))


def _coerce(value: Any) -> Alignment:
    if isinstance(value, Alignment):
        return value
    if isinstance(value, str):
        return Alignment.parse(value)
    raise TypeError(f"Expected Alignment or marker string, got {type(value).__name__}")
