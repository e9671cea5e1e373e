"""Tests for table boundary detection."""

import pytest

from gridtable.core.exceptions import ColumnHasNoDataError, EmptyRowError, TableNotFoundError
from gridtable.detectors.boundary_detector import (
    BoundaryDetector,
    column_bounds,
    contiguous_run_end,
)
from gridtable.models.sheet_data import MISSING_CELL, SheetData
from gridtable.models.table import ColumnRange


class TestColumnRuns:
    def test_column_bounds(self, make_row):
        row = make_row(1, {5: "c", 2: "a", 3: "b"})
        assert column_bounds(row) == (2, 5)

    def test_column_bounds_on_empty_row(self, make_row):
        with pytest.raises(EmptyRowError):
            column_bounds(make_row(1, {}))

    def test_run_breaks_at_gap(self, make_row):
        row = make_row(1, {2: "a", 3: "b", 5: "c"})
        assert contiguous_run_end(row, 2) == 3

    def test_run_from_later_anchor(self, make_row):
        row = make_row(1, {2: "a", 3: "b", 5: "c", 6: "d"})
        assert contiguous_run_end(row, 5) == 6

    def test_single_populated_column(self, make_row):
        row = make_row(1, {4: "x"})
        assert contiguous_run_end(row, 4) == 4

    def test_unpopulated_anchor(self, make_row):
        row = make_row(1, {2: "a", 3: "b"})
        with pytest.raises(EmptyRowError):
            contiguous_run_end(row, 1)

    def test_missing_value_counts_as_populated(self, make_row):
        row = make_row(1, {2: "a", 3: MISSING_CELL, 4: "c"})
        assert contiguous_run_end(row, 2) == 4

    def test_require_value_breaks_at_missing(self, make_row):
        row = make_row(1, {2: "a", 3: MISSING_CELL, 4: "c"})
        assert contiguous_run_end(row, 2, require_value=True) == 2

    def test_require_value_rejects_missing_anchor(self, make_row):
        row = make_row(1, {2: MISSING_CELL, 3: "b"})
        with pytest.raises(EmptyRowError):
            contiguous_run_end(row, 2, require_value=True)


class TestBoundaryDetector:
    def test_detects_first_row_with_data(self):
        sheet = SheetData.from_rows(
            "Offset",
            [
                [],
                [None, "a", "b", "c"],
                [None, 1, 2, 3],
            ],
        )

        bounds = BoundaryDetector(sheet).detect()

        assert bounds.first_row == 2
        assert bounds.column_range == ColumnRange(start=2, stop=4)

    def test_skips_rows_with_only_missing_values(self):
        sheet = SheetData.from_rows(
            "Styled",
            [
                [MISSING_CELL, MISSING_CELL],
                [MISSING_CELL, "x", "y", MISSING_CELL, "z"],
            ],
        )

        bounds = BoundaryDetector(sheet).detect()

        assert bounds.first_row == 2
        assert bounds.column_range == ColumnRange(start=2, stop=3)

    def test_single_value_row(self):
        sheet = SheetData.from_rows("Single", [[None, None, "only"]])
        bounds = BoundaryDetector(sheet).detect()
        assert bounds.column_range == ColumnRange(start=3, stop=3)

    def test_respects_first_row_lower_bound(self, multi_table_sheet):
        bounds = BoundaryDetector(multi_table_sheet).detect(first_row=4)

        assert bounds.first_row == 6
        assert bounds.column_range.excel_range == "C:E"

    def test_no_table(self):
        sheet = SheetData.from_rows("Blank", [[], [MISSING_CELL]])

        with pytest.raises(TableNotFoundError, match="Blank"):
            BoundaryDetector(sheet).detect()

    def test_no_table_below_lower_bound(self, multi_table_sheet):
        with pytest.raises(TableNotFoundError):
            BoundaryDetector(multi_table_sheet).detect(first_row=9)

    def test_first_row_with_data(self, multi_table_sheet):
        detector = BoundaryDetector(multi_table_sheet)

        assert detector.first_row_with_data(1) == 1
        assert detector.first_row_with_data(4) == 6

    def test_column_without_data(self, multi_table_sheet):
        with pytest.raises(ColumnHasNoDataError, match="Column F has no data"):
            BoundaryDetector(multi_table_sheet).first_row_with_data(6)
