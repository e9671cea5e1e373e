"""Data models for representing sheet content.

Rows and columns are addressed by 1-based physical numbers, the way they
appear in a spreadsheet (row 1, column A = 1). A cell may be *populated*
(present in the sheet, e.g. because it carries formatting) while its value is
*missing* (``None``).
"""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from ..utils.excel_utils import to_excel_address

CellValue = str | int | float | bool | datetime | date | time | Decimal | None


class _MissingCell:
    """Marker for ``SheetData.from_rows``: a populated cell without a value."""

    def __repr__(self) -> str:
        return "MISSING_CELL"


MISSING_CELL = _MissingCell()


def _data_type_of(value: CellValue) -> str:
    if value is None:
        return "empty"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float | Decimal):
        return "number"
    if isinstance(value, datetime | date | time):
        return "date"
    return "text"


class CellData(BaseModel):
    """Represents a single cell with its value."""

    model_config = ConfigDict(strict=True)

    value: CellValue = Field(None, description="Decoded cell value, None when missing")
    formatted_value: str | None = Field(None, description="Formatted string representation")
    data_type: str = Field("text", description="Detected data type")
    has_formula: bool = Field(False, description="Cell contains formula")
    formula: str | None = Field(None, description="Formula text")

    # Position information
    row: int = Field(..., ge=1, description="Row number (1-based)")
    column: int = Field(..., ge=1, description="Column number (1-based)")

    @property
    def is_missing(self) -> bool:
        """True when the cell exists but holds no value."""
        return self.value is None

    @property
    def excel_address(self) -> str:
        """Get Excel-style address (e.g., 'A1')."""
        return to_excel_address(self.row, self.column)


@dataclass(frozen=True)
class SheetRow:
    """Read-only snapshot of one physical row of a sheet."""

    row_number: int
    cells: Mapping[int, CellData] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when the row has no populated cell."""
        return not self.cells

    @property
    def column_numbers(self) -> tuple[int, ...]:
        """Populated physical column numbers in ascending order."""
        return tuple(sorted(self.cells))

    def get_cell(self, column: int) -> CellData | None:
        """Get the populated cell at ``column``, if any."""
        return self.cells.get(column)

    def get_value(self, column: int) -> CellValue:
        """Get the decoded value at ``column``; None when the cell is absent or missing."""
        cell = self.cells.get(column)
        return None if cell is None else cell.value

    def has_value(self, column: int) -> bool:
        """Check whether ``column`` holds a non-missing value."""
        return self.get_value(column) is not None


class RowSource(Protocol):
    """Row-sequence contract consumed by the table readers."""

    name: str

    def row_numbers(self) -> tuple[int, ...]:
        """Physical numbers of the rows in the source, ascending."""
        ...

    def get_row(self, row_number: int) -> SheetRow | None:
        """Snapshot of a row, or None when the source has no such row."""
        ...


class SheetData(BaseModel):
    """Represents a complete sheet as a sparse set of rows and cells."""

    model_config = ConfigDict(strict=True)

    name: str = Field(..., description="Sheet name")
    rows: dict[int, dict[int, CellData]] = Field(
        default_factory=dict,
        description="Populated cells indexed by row number, then column number",
    )
    max_row: int = Field(0, ge=0, description="Maximum row number present")
    max_column: int = Field(0, ge=0, description="Maximum column number with a cell")

    @classmethod
    def from_rows(
        cls,
        name: str,
        rows: Sequence[Sequence[Any] | None],
        first_row: int = 1,
        first_column: int = 1,
    ) -> "SheetData":
        """Build a sheet from nested lists of values.

        Each inner list fills one row starting at ``first_column``. Within a row,
        ``None`` leaves the cell unpopulated and ``MISSING_CELL`` adds a populated
        cell without a value. A ``None`` row leaves the physical row out of the
        sheet entirely, while an empty list declares a row with no cells.
        """
        sheet = cls(name=name)
        for offset, values in enumerate(rows):
            if values is None:
                continue
            row_number = first_row + offset
            sheet.declare_row(row_number)
            for col_offset, value in enumerate(values):
                if value is None:
                    continue
                if value is MISSING_CELL:
                    value = None
                sheet.set_cell(
                    row_number,
                    first_column + col_offset,
                    CellData(
                        value=value,
                        data_type=_data_type_of(value),
                        row=row_number,
                        column=first_column + col_offset,
                    ),
                )
        return sheet

    def declare_row(self, row: int) -> None:
        """Make sure a row exists, even if it never receives a cell."""
        self.rows.setdefault(row, {})
        self.max_row = max(self.max_row, row)

    def get_cell(self, row: int, column: int) -> CellData | None:
        """Get cell data by row and column numbers."""
        return self.rows.get(row, {}).get(column)

    def set_cell(self, row: int, column: int, cell_data: CellData) -> None:
        """Set cell data at specific position."""
        cell_data.row = row
        cell_data.column = column
        self.declare_row(row)
        self.rows[row][column] = cell_data
        self.max_column = max(self.max_column, column)

    def row_numbers(self) -> tuple[int, ...]:
        """Physical numbers of all rows in the sheet, ascending."""
        return tuple(sorted(self.rows))

    def get_row(self, row_number: int) -> SheetRow | None:
        """Snapshot of one row, or None when the sheet has no such row."""
        cells = self.rows.get(row_number)
        if cells is None:
            return None
        return SheetRow(row_number=row_number, cells=MappingProxyType(dict(cells)))

    def iter_rows(self) -> Iterator[SheetRow]:
        """Iterate row snapshots in ascending row order."""
        for row_number in self.row_numbers():
            yield self.get_row(row_number)

    def get_non_empty_cells(self) -> list[CellData]:
        """Get all cells holding a non-missing value."""
        return [
            cell for cells in self.rows.values() for cell in cells.values() if not cell.is_missing
        ]
