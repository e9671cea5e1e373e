"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from typing import Any

import pytest

from gridtable.models.sheet_data import MISSING_CELL, CellData, SheetData, SheetRow


@pytest.fixture
def make_row() -> Callable[..., SheetRow]:
    """Factory for single SheetRow snapshots from {column: value} mappings."""

    def _make_row(row_number: int, values: dict[int, Any]) -> SheetRow:
        cells = {
            column: CellData(
                value=None if value is MISSING_CELL else value, row=row_number, column=column
            )
            for column, value in values.items()
        }
        return SheetRow(row_number=row_number, cells=cells)

    return _make_row


@pytest.fixture
def sales_sheet() -> SheetData:
    """Header in B2:D2, three data rows, a missing row 6 and one more data row."""
    return SheetData.from_rows(
        "Sales",
        [
            [],  # row 1 exists but has no cells
            [None, "id", "name", "score"],
            [None, 1, "Alice", 9.5],
            [None, 2, "Bob", None],
            [None, 3, "Carol", 7.0],
            None,  # row 6 not in the sheet
            [None, 4, "Dave", 8.0],
        ],
    )


@pytest.fixture
def blank_row_sheet() -> SheetData:
    """Header in row 1, data in rows 2-3, row 4 populated but blank, data in row 5."""
    return SheetData.from_rows(
        "BlankRow",
        [
            ["a", "b"],
            [1, 2],
            [3, 4],
            [MISSING_CELL, MISSING_CELL],
            [5, 6],
        ],
    )


@pytest.fixture
def multi_table_sheet() -> SheetData:
    """Two tables: A1:B3 and C6:E8, separated by blank rows."""
    return SheetData.from_rows(
        "MultiTable",
        [
            ["Product", "Price"],
            ["Apple", 1.5],
            ["Banana", 0.8],
            [],
            [],
            [None, None, "Name", "Department", "Salary"],
            [None, None, "John", "Sales", 50000],
            [None, None, "Jane", "Marketing", 55000],
        ],
    )
