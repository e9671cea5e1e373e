"""Tests for TableRowIterator traversal and stop rules."""

import pytest

from gridtable.models.sheet_data import MISSING_CELL, SheetData
from gridtable.rows.factory import ExplicitRange, table_row_iterator


def sheet_rows(itr) -> list[int]:
    return [row.sheet_row_number for row in itr]


class TestStopOnEmptyRow:
    def test_stops_before_blank_row(self, blank_row_sheet):
        itr = table_row_iterator(blank_row_sheet, ExplicitRange("A:B", first_row=1))
        assert sheet_rows(itr) == [2, 3]

    def test_stops_at_skipped_row(self, sales_sheet):
        itr = table_row_iterator(sales_sheet, ExplicitRange("B:D", first_row=2))
        assert sheet_rows(itr) == [3, 4, 5]

    def test_stops_at_row_without_cells(self):
        sheet = SheetData.from_rows("NoCells", [["a"], [1], [], [2]])
        itr = table_row_iterator(sheet, ExplicitRange("A", first_row=1))
        assert sheet_rows(itr) == [2]

    def test_stops_when_data_is_outside_the_columns(self):
        sheet = SheetData.from_rows("Outside", [["a", "b"], [1, 2], [None, None, "note"], [3, 4]])
        itr = table_row_iterator(sheet, ExplicitRange("A:B", first_row=1))
        assert sheet_rows(itr) == [2]

    def test_partial_rows_continue(self):
        sheet = SheetData.from_rows("Partial", [["a", "b"], [1, None], [None, 2], [3, 4]])
        itr = table_row_iterator(sheet, ExplicitRange("A:B", first_row=1))
        assert sheet_rows(itr) == [2, 3, 4]

    def test_runs_to_last_row(self, multi_table_sheet):
        itr = table_row_iterator(multi_table_sheet, ExplicitRange("C:E", first_row=6))
        assert sheet_rows(itr) == [7, 8]


class TestKeepEmptyRows:
    def test_continues_through_blank_rows(self, blank_row_sheet):
        itr = table_row_iterator(
            blank_row_sheet, ExplicitRange("A:B", first_row=1), stop_on_empty_row=False
        )
        assert sheet_rows(itr) == [2, 3, 4, 5]

    def test_continues_across_skipped_rows(self, sales_sheet):
        itr = table_row_iterator(
            sales_sheet, ExplicitRange("B:D", first_row=2), stop_on_empty_row=False
        )
        assert sheet_rows(itr) == [3, 4, 5, 7]

    def test_blank_rows_are_produced(self, blank_row_sheet):
        itr = table_row_iterator(
            blank_row_sheet, ExplicitRange("A:B", first_row=1), stop_on_empty_row=False
        )
        assert [list(row) for row in itr] == [[1, 2], [3, 4], [None, None], [5, 6]]


class TestStopPredicate:
    def test_stops_before_matching_row(self, sales_sheet):
        itr = table_row_iterator(
            sales_sheet,
            ExplicitRange("B:D", first_row=2),
            stop_predicate=lambda row: row["name"] == "Carol",
        )
        assert sheet_rows(itr) == [3, 4]

    def test_checked_before_empty_row_rules(self, blank_row_sheet):
        seen = []

        def stop(row):
            seen.append((row.table_row_number, row.sheet_row_number))
            return False

        itr = table_row_iterator(
            blank_row_sheet, ExplicitRange("A:B", first_row=1), stop_predicate=stop
        )

        assert sheet_rows(itr) == [2, 3]
        # the blank row 4 reached the predicate before the blank-row rule ended the table
        assert seen == [(1, 2), (2, 3), (3, 4)]

    def test_applies_without_stop_on_empty_row(self, blank_row_sheet):
        itr = table_row_iterator(
            blank_row_sheet,
            ExplicitRange("A:B", first_row=1),
            stop_on_empty_row=False,
            stop_predicate=lambda row: row["a"] == 5,
        )
        assert sheet_rows(itr) == [2, 3, 4]

    def test_stop_at_first_row(self, sales_sheet):
        itr = table_row_iterator(
            sales_sheet, ExplicitRange("B:D", first_row=2), stop_predicate=lambda row: True
        )
        assert sheet_rows(itr) == []


class TestEmptyTables:
    def test_header_only(self):
        sheet = SheetData.from_rows("HeaderOnly", [["a", "b"]])
        itr = table_row_iterator(sheet, ExplicitRange("A:B", first_row=1))
        assert list(itr) == []

    def test_missing_first_data_row(self):
        sheet = SheetData.from_rows("Gap", [["a", "b"], None, [1, 2]])
        itr = table_row_iterator(sheet, ExplicitRange("A:B", first_row=1), stop_on_empty_row=False)
        assert list(itr) == []

    def test_blank_first_data_row(self):
        sheet = SheetData.from_rows("BlankFirst", [["a"], [MISSING_CELL], [1]])
        itr = table_row_iterator(sheet, ExplicitRange("A", first_row=1))
        assert list(itr) == []


class TestStateSnapshots:
    def test_start_state(self, sales_sheet):
        itr = table_row_iterator(sales_sheet, ExplicitRange("B:D", first_row=2))
        state = itr.start()

        assert state.sheet_row.row_number == 3
        assert state.table_row_index == 1
        assert state.last_sheet_row_number == 3
        assert not state.is_done

    def test_exhausted_start_state(self):
        sheet = SheetData.from_rows("HeaderOnly", [["a"]])
        itr = table_row_iterator(sheet, ExplicitRange("A", first_row=1))
        state = itr.start()

        assert state.is_done
        assert state.sheet_row is None
        assert itr.is_done(state)

    def test_step_returns_new_state(self, sales_sheet):
        itr = table_row_iterator(sales_sheet, ExplicitRange("B:D", first_row=2))
        state = itr.start()

        row, next_state = itr.step(state)
        again, _ = itr.step(state)

        assert row.sheet_row_number == again.sheet_row_number == 3
        assert state.sheet_row.row_number == 3
        assert next_state.sheet_row.row_number == 4
        assert next_state.table_row_index == 2
        assert next_state.last_sheet_row_number == 3

    def test_last_row_exhausts_state(self, multi_table_sheet):
        itr = table_row_iterator(multi_table_sheet, ExplicitRange("C:E", first_row=6))
        state = itr.start()
        _, state = itr.step(state)
        last, state = itr.step(state)

        assert last.sheet_row_number == 8
        assert state.is_done
        assert itr.is_done(state)
        with pytest.raises(ValueError):
            itr.step(state)

    def test_table_row_numbers_count_produced_rows(self, sales_sheet):
        itr = table_row_iterator(
            sales_sheet, ExplicitRange("B:D", first_row=2), stop_on_empty_row=False
        )
        assert [row.table_row_number for row in itr] == [1, 2, 3, 4]

    def test_independent_traversals(self, sales_sheet):
        itr = table_row_iterator(sales_sheet, ExplicitRange("B:D", first_row=2))
        first, second = iter(itr), iter(itr)

        assert next(first).sheet_row_number == 3
        assert next(first).sheet_row_number == 4
        assert next(second).sheet_row_number == 3
        assert [row.sheet_row_number for row in first] == [5]
        assert [row.sheet_row_number for row in second] == [4, 5]


def test_iterator_accessors(sales_sheet):
    itr = table_row_iterator(sales_sheet, ExplicitRange("B:D", first_row=2))

    assert itr.column_labels == ("id", "name", "score")
    assert itr.table_columns_count == 3
    assert itr.first_data_row == 3
    assert "B:D" in repr(itr)
