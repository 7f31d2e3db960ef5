"""
mdtable: Aligned plain-text tables in Markdown style.

This library provides:
- A fixed-column row model shared by headers, alignments, widths and content
- Column widths computed as the running maximum of every cell seen
- Left, center and right alignment, written as ``---``, ``:---:``, ``---:``
- A single-use builder that enforces the table's structure

Example:
    from mdtable import Alignment, TableBuilder

    table = (
        TableBuilder()
        .header(("Name", ["Age", "City"]))
        .alignments((Alignment.LEFT, ["---:", ":---:"]))
        .row(("Alice", ["30", "NYC"]))
        .row(("Bob", ["7", "LA"]))
        .finish()
    )
    print(table)

    # Name  |  Age | City
    # ---   | ---: | :---:
    # Alice |   30 |  NYC
    # Bob   |    7 |  LA
"""

from .alignment import DEFAULT_COLUMN_ALIGNMENT, DEFAULT_LABEL_ALIGNMENT, Alignment
from .builder import TableBuilder
from .exceptions import (
    AlignmentParseError,
    AlignmentsAlreadySetError,
    BuilderFinishedError,
    ColumnCountMismatchError,
    HeaderAlreadySetError,
    MdTableError,
    MissingHeaderError,
    TableBuilderError,
    TableStructureError,
)
from .render import SEPARATOR, pad, render_row
from .row import Row, RowLike, Widths, cell_text, elementwise_max
from .table import Table

__version__ = "0.1.0"

__all__ = [
    # Models
    "Alignment",
    "Row",
    "RowLike",
    "Table",
    "TableBuilder",
    "Widths",
    # Rendering
    "SEPARATOR",
    "cell_text",
    "elementwise_max",
    "pad",
    "render_row",
    # Defaults
    "DEFAULT_COLUMN_ALIGNMENT",
    "DEFAULT_LABEL_ALIGNMENT",
    # Exceptions
    "MdTableError",
    "AlignmentParseError",
    "TableStructureError",
    "ColumnCountMismatchError",
    "TableBuilderError",
    "HeaderAlreadySetError",
    "AlignmentsAlreadySetError",
    "MissingHeaderError",
    "BuilderFinishedError",
    "__version__",
]
