"""Per-row view of a table, restricted to the table's columns."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..models.sheet_data import CellData, CellValue, SheetRow

if TYPE_CHECKING:
    from .index import Index
    from .iterator import TableRowIterator


@dataclass(frozen=True, eq=False)
class TableRow:
    """One row of a table.

    Values are addressed by 1-based table column ordinal (``row[1]``) or by
    column label (``row["name"]``). Iterating a row yields its values in
    table column order.
    """

    itr: "TableRowIterator"
    sheet_row: SheetRow
    table_row_number: int

    @property
    def index(self) -> "Index":
        return self.itr.index

    @property
    def sheet_row_number(self) -> int:
        """Physical row number on the sheet."""
        return self.sheet_row.row_number

    @property
    def column_labels(self) -> tuple[str, ...]:
        return self.index.column_labels

    def get_column_label(self, ordinal: int) -> str:
        return self.index.get_column_label(ordinal)

    def get_cell(self, ordinal: int) -> CellData | None:
        """Get the underlying cell for a table column, if populated."""
        return self.sheet_row.get_cell(self.index.table_column_to_sheet_column_number(ordinal))

    def get_value(self, key: int | str) -> CellValue:
        """Get a value by table column ordinal or label.

        Raises:
            InvalidColumnLabelError: If ``key`` is an unknown label
            IndexError: If ``key`` is an ordinal outside the table
        """
        if isinstance(key, str):
            key = self.index.ordinal_for(key)
        return self.sheet_row.get_value(self.index.table_column_to_sheet_column_number(key))

    def __getitem__(self, key: int | str) -> CellValue:
        return self.get_value(key)

    def __iter__(self) -> Iterator[CellValue]:
        return (self.get_value(ordinal) for ordinal in self.index.table_column_numbers())

    def __len__(self) -> int:
        return self.index.table_columns_count

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dict keyed by column label."""
        return dict(zip(self.column_labels, self, strict=True))

    def __repr__(self) -> str:
        return (
            f"TableRow(table_row_number={self.table_row_number}, "
            f"sheet_row_number={self.sheet_row_number}, values={list(self)!r})"
        )
