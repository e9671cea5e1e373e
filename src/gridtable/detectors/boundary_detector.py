"""Table boundary detection for sparse sheets.

A table is located by its first row holding data: the table starts at the
leftmost column with a value and extends right over the contiguous run of
non-missing cells. When the caller already knows the columns, only the first
row with data in the anchor column has to be found.
"""

import logging
from typing import TYPE_CHECKING

from ..core.constants import TABLE_DEFAULTS
from ..core.exceptions import ColumnHasNoDataError, EmptyRowError, TableNotFoundError
from ..models.table import ColumnRange, TableBounds
from ..utils.excel_utils import get_column_letter

if TYPE_CHECKING:
    from ..models.sheet_data import RowSource, SheetRow

logger = logging.getLogger(__name__)


def column_bounds(row: "SheetRow") -> tuple[int, int]:
    """Return the first and last populated column numbers of a row.

    Raises:
        EmptyRowError: If the row has no populated cell
    """
    if row.is_empty:
        raise EmptyRowError(f"Can't get column bounds from empty row {row.row_number}.")

    columns = row.column_numbers
    return columns[0], columns[-1]


def contiguous_run_end(row: "SheetRow", anchor: int, require_value: bool = False) -> int:
    """Find the last column of the gap-free run of cells starting at ``anchor``.

    Args:
        row: Row to scan
        anchor: Populated column where the run starts
        require_value: Treat populated cells with a missing value as gaps

    Returns:
        Column number where the run ends (``anchor`` itself for a one-cell run)

    Raises:
        EmptyRowError: If the anchor cell is not populated
    """
    anchor_populated = (
        row.has_value(anchor) if require_value else row.get_cell(anchor) is not None
    )
    if not anchor_populated:
        raise EmptyRowError(
            f"Can't get column bounds based on empty anchor cell "
            f"{get_column_letter(anchor)}{row.row_number}."
        )

    run_end = anchor
    for column in row.column_numbers:
        if column <= anchor:
            continue
        if column != run_end + 1:
            break
        if require_value and not row.has_value(column):
            break
        run_end = column

    return run_end


class BoundaryDetector:
    """Infers where a table sits on a sheet."""

    def __init__(self, sheet: "RowSource"):
        """Initialize the boundary detector.

        Args:
            sheet: Row source to scan
        """
        self.sheet = sheet
        self.logger = logger

    def detect(self, first_row: int = TABLE_DEFAULTS.FIRST_ROW) -> TableBounds:
        """Locate the first table at or below ``first_row``.

        The first row with any non-missing value becomes the table's first row.
        Its leftmost column with a value starts the column range, which ends
        where the run of non-missing, consecutive columns breaks.

        Args:
            first_row: Rows above this physical row are skipped

        Returns:
            TableBounds for the discovered table

        Raises:
            TableNotFoundError: If no row at or below ``first_row`` holds data
        """
        for row_number in self.sheet.row_numbers():
            if row_number < first_row:
                continue

            row = self.sheet.get_row(row_number)
            if row is None or row.is_empty:
                continue

            for column in row.column_numbers:
                if not row.has_value(column):
                    continue

                column_stop = contiguous_run_end(row, column, require_value=True)
                bounds = TableBounds(
                    first_row=row_number,
                    column_range=ColumnRange(start=column, stop=column_stop),
                )
                self.logger.debug(
                    f"Row {row_number} spans columns {column_bounds(row)}; "
                    f"table starts at {get_column_letter(column)}{row_number}"
                )
                self.logger.info(
                    f"Detected table in sheet {self.sheet.name!r} at row {row_number}, "
                    f"columns {bounds.column_range.excel_range}"
                )
                return bounds

        raise TableNotFoundError(f"Couldn't find a table in sheet {self.sheet.name}")

    def first_row_with_data(self, column: int) -> int:
        """Find the first row holding a non-missing value in ``column``.

        Raises:
            ColumnHasNoDataError: If the column has no data in any row
        """
        for row_number in self.sheet.row_numbers():
            row = self.sheet.get_row(row_number)
            if row is not None and row.has_value(column):
                self.logger.debug(
                    f"First data in column {get_column_letter(column)} is at row {row_number}"
                )
                return row_number

        raise ColumnHasNoDataError(f"Column {get_column_letter(column)} has no data.")
