"""Exceptions for mdtable."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class MdTableError(Exception):
    """
    Base exception for all mdtable errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class TableStructureError(MdTableError):
    """
    Base exception for violations of the table construction contract.

    These indicate a bug in the calling code (rows of the wrong shape,
    builder steps in the wrong order) rather than a condition to recover
    from at runtime.
    """

    pass


class TableBuilderError(TableStructureError):
    """
    Base exception for misuse of ``TableBuilder``.

    Raised at the point of misuse: setting the header or alignments twice,
    finishing without a header, or touching a builder after ``finish()``.
    """

    pass


# ---------------------------------------------------------------------------
# Parse Exceptions
# ---------------------------------------------------------------------------


class AlignmentParseError(MdTableError, ValueError):
    """
    Raised when a string is not one of the recognized alignment markers.

    Attributes:
        marker: The rejected input
    """

    def __init__(self, marker: str) -> None:
        self.marker = marker
        super().__init__(
            f"Unrecognized alignment marker {marker!r}: "
            "expected one of '---', ':---', ':---:', '---:'"
        )


# ---------------------------------------------------------------------------
# Structure Exceptions
# ---------------------------------------------------------------------------


class ColumnCountMismatchError(TableStructureError, ValueError):
    """
    Raised when a row does not have the column count of its table.

    Attributes:
        expected: Data-column count fixed for the table
        actual: Data-column count of the offending row
    """

    def __init__(self, expected: int, actual: int, what: str = "row") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Column count mismatch: {what} has {actual} data cells, expected {expected}"
        )


class HeaderAlreadySetError(TableBuilderError):
    """Raised when the header is set a second time."""

    def __init__(self) -> None:
        super().__init__("Table header is already set")


class AlignmentsAlreadySetError(TableBuilderError):
    """Raised when alignments are set (or defaulted) a second time."""

    def __init__(self) -> None:
        super().__init__("Table alignments are already set")


class MissingHeaderError(TableBuilderError):
    """Raised by ``finish()`` when no header was supplied."""

    def __init__(self) -> None:
        super().__init__("Cannot finish a table without a header")


class BuilderFinishedError(TableBuilderError):
    """Raised when a builder is used after ``finish()`` consumed it."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot call {operation}() on a finished TableBuilder")
