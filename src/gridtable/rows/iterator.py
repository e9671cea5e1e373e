"""Lazy iteration over the rows of a table.

Traversal is expressed as a sequence of immutable state values::

    state = itr.start()
    while not itr.is_done(state):
        row, state = itr.step(state)

``TableRowIterator.__iter__`` runs exactly this loop, so every ``for`` loop over
an iterator is an independent traversal that shares nothing with other
traversals of the same sheet.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..models.sheet_data import SheetRow
from .table_row import TableRow

if TYPE_CHECKING:
    from ..models.sheet_data import RowSource
    from .index import Index

logger = logging.getLogger(__name__)

StopPredicate = Callable[[TableRow], bool]


@dataclass(frozen=True)
class RowCursor:
    """Position within a snapshot of a sheet's row numbers."""

    row_numbers: tuple[int, ...]
    position: int = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.row_numbers)

    def advance(self, sheet: "RowSource") -> tuple[SheetRow, "RowCursor"]:
        """Read the row under the cursor and return it with the next cursor."""
        row_number = self.row_numbers[self.position]
        row = sheet.get_row(row_number)
        if row is None:
            # listed by row_numbers() but gone: the sheet changed mid-traversal
            row = SheetRow(row_number=row_number)
        return row, RowCursor(self.row_numbers, self.position + 1)


@dataclass(frozen=True, eq=False)
class TableRowIteratorState:
    """Snapshot of a traversal between two steps.

    Attributes:
        cursor: Position of the next sheet row to read
        sheet_row: Candidate row for the next step, None once the sheet is exhausted
        table_row_index: Ordinal the candidate row gets when produced (1-based)
        last_sheet_row_number: Physical number of the previously produced row
        is_done: True when there is no candidate row left
    """

    cursor: RowCursor
    sheet_row: SheetRow | None
    table_row_index: int
    last_sheet_row_number: int
    is_done: bool


class TableRowIterator:
    """Lazy, forward-only sequence of the rows of one table.

    Use ``gridtable.rows.table_row_iterator`` to build one from a sheet; it
    resolves the table location and the column index.

    A traversal ends when, checking the candidate row in this order:

    1. ``stop_predicate`` returns True for it
    2. the sheet has no more rows
    3. (only with ``stop_on_empty_row``) it doesn't directly follow the previous row,
       it has no populated cell, or it has no value inside the table's columns

    With ``stop_on_empty_row=False`` blank rows are produced and the traversal only
    ends at the last row of the sheet or when ``stop_predicate`` says so.
    """

    def __init__(
        self,
        sheet: "RowSource",
        index: "Index",
        first_data_row: int,
        stop_on_empty_row: bool = True,
        stop_predicate: StopPredicate | None = None,
    ):
        self.sheet = sheet
        self.index = index
        self.first_data_row = first_data_row
        self.stop_on_empty_row = stop_on_empty_row
        self.stop_predicate = stop_predicate

    @property
    def column_labels(self) -> tuple[str, ...]:
        return self.index.column_labels

    @property
    def table_columns_count(self) -> int:
        return self.index.table_columns_count

    def start(self) -> TableRowIteratorState:
        """Seek the first data row and return the initial state."""
        cursor = RowCursor(tuple(self.sheet.row_numbers()))

        while not cursor.exhausted:
            sheet_row, cursor = cursor.advance(self.sheet)
            if sheet_row.row_number == self.first_data_row:
                return TableRowIteratorState(
                    cursor=cursor,
                    sheet_row=sheet_row,
                    table_row_index=1,
                    last_sheet_row_number=self.first_data_row,
                    is_done=False,
                )
            if sheet_row.row_number > self.first_data_row:
                break

        logger.debug(f"Row {self.first_data_row} not found in sheet {self.sheet.name!r}")
        return TableRowIteratorState(
            cursor=cursor,
            sheet_row=None,
            table_row_index=1,
            last_sheet_row_number=self.first_data_row,
            is_done=True,
        )

    def step(self, state: TableRowIteratorState) -> tuple[TableRow, TableRowIteratorState]:
        """Produce the candidate row and the state for the following step."""
        if state.sheet_row is None:
            raise ValueError("Can't step past the end of the table.")

        table_row = TableRow(self, state.sheet_row, state.table_row_index)

        if state.cursor.exhausted:
            next_row, next_cursor = None, state.cursor
        else:
            next_row, next_cursor = state.cursor.advance(self.sheet)

        next_state = TableRowIteratorState(
            cursor=next_cursor,
            sheet_row=next_row,
            table_row_index=state.table_row_index + 1,
            last_sheet_row_number=state.sheet_row.row_number,
            is_done=next_row is None,
        )
        return table_row, next_state

    def is_done(self, state: TableRowIteratorState) -> bool:
        """Decide whether the traversal ends before the candidate row."""
        candidate = state.sheet_row

        if candidate is not None and self.stop_predicate is not None:
            if self.stop_predicate(TableRow(self, candidate, state.table_row_index)):
                logger.debug(f"Stop predicate ended table at row {candidate.row_number}")
                return True

        if state.is_done or candidate is None:
            return True
        elif not self.stop_on_empty_row:
            return False

        row_number = candidate.row_number
        if row_number != self.first_data_row and row_number != state.last_sheet_row_number + 1:
            logger.debug(f"Table ended at skipped rows before row {row_number}")
            return True

        if candidate.is_empty:
            logger.debug(f"Table ended at empty row {row_number}")
            return True

        for column in self.index.sheet_column_numbers():
            if candidate.has_value(column):
                return False

        logger.debug(f"Table ended at row {row_number}: no data inside the column range")
        return True

    def __iter__(self) -> Iterator[TableRow]:
        state = self.start()
        while not self.is_done(state):
            table_row, state = self.step(state)
            yield table_row

    def __repr__(self) -> str:
        return (
            f"TableRowIterator(sheet={self.sheet.name!r}, "
            f"columns={self.index.column_range.excel_range}, "
            f"first_data_row={self.first_data_row})"
        )
