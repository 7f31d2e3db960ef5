"""Unit test fixtures for mdtable."""

import pytest

from mdtable import Row, Table, TableBuilder


@pytest.fixture
def people_builder() -> TableBuilder:
    """Builder with a two-column header and two content rows."""
    return (
        TableBuilder()
        .header(("Name", ["Age", "City"]))
        .row(("Alice", ["30", "NYC"]))
        .row(("Bob", ["7", "LA"]))
    )


@pytest.fixture
def people_table(people_builder: TableBuilder) -> Table:
    """Finished table from people_builder with default alignments."""
    return people_builder.finish()


@pytest.fixture
def single_column_rows() -> list[Row[str, str]]:
    """Content rows for a one-column table."""
    return [Row("Alice", ("30",)), Row("Bo", ("7",))]
