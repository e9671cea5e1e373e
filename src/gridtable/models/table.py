"""Table-related models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.exceptions import InvalidColumnLabelError
from ..utils.excel_utils import get_column_letter, parse_column_range


class ColumnRange(BaseModel):
    """Inclusive range of physical sheet columns (1-based)."""

    model_config = ConfigDict(strict=True, frozen=True)

    start: int = Field(..., ge=1, description="First column number")
    stop: int = Field(..., ge=1, description="Last column number (inclusive)")

    @model_validator(mode="after")
    def _check_order(self) -> "ColumnRange":
        if self.start > self.stop:
            raise ValueError(f"Column range start ({self.start}) is after stop ({self.stop})")
        return self

    @classmethod
    def parse(cls, value: "ColumnRange | str") -> "ColumnRange":
        """Build a range from ``"B:D"``/``"C"`` notation, passing ranges through."""
        if isinstance(value, ColumnRange):
            return value
        start, stop = parse_column_range(value)
        return cls(start=start, stop=stop)

    @property
    def size(self) -> int:
        """Number of columns in the range."""
        return self.stop - self.start + 1

    @property
    def columns(self) -> range:
        """Physical column numbers in ascending order."""
        return range(self.start, self.stop + 1)

    @property
    def excel_range(self) -> str:
        """Convert to Excel-style column range (e.g., 'B:D')."""
        return f"{get_column_letter(self.start)}:{get_column_letter(self.stop)}"

    def __len__(self) -> int:
        return self.size

    def __contains__(self, column: object) -> bool:
        return isinstance(column, int) and self.start <= column <= self.stop


class TableBounds(BaseModel):
    """Location of a table discovered on a sheet."""

    model_config = ConfigDict(strict=True, frozen=True)

    first_row: int = Field(..., ge=1, description="Row holding the header or first data row")
    column_range: ColumnRange = Field(..., description="Columns that belong to the table")


class Table(BaseModel):
    """A materialized table stored column by column."""

    columns: list[list[Any]] = Field(
        default_factory=list, description="One list of values per table column"
    )
    column_labels: list[str] = Field(default_factory=list, description="Label of each column")
    column_types: list[Any] | None = Field(
        None, description="Inferred element type of each column, when inference ran"
    )

    @model_validator(mode="after")
    def _check_shape(self) -> "Table":
        if len(self.columns) != len(self.column_labels):
            raise ValueError(
                f"Table has {len(self.columns)} columns but {len(self.column_labels)} labels"
            )
        if len({len(column) for column in self.columns}) > 1:
            raise ValueError("All table columns must have the same length")
        return self

    @property
    def row_count(self) -> int:
        """Number of data rows."""
        return len(self.columns[0]) if self.columns else 0

    @property
    def column_count(self) -> int:
        """Number of columns."""
        return len(self.columns)

    @property
    def shape(self) -> tuple[int, int]:
        """Table shape as (rows, columns)."""
        return (self.row_count, self.column_count)

    def get_column(self, key: int | str) -> list[Any]:
        """Get a column by 1-based ordinal or by label."""
        if isinstance(key, str):
            try:
                key = self.column_labels.index(key) + 1
            except ValueError:
                raise InvalidColumnLabelError(f"Invalid column label: {key}.") from None
        if not 1 <= key <= self.column_count:
            raise IndexError(f"Table column {key} out of range 1:{self.column_count}")
        return self.columns[key - 1]

    def to_records(self) -> list[dict[str, Any]]:
        """Convert to a list of row dicts keyed by column label."""
        return [
            dict(zip(self.column_labels, values, strict=True))
            for values in zip(*self.columns, strict=True)
        ]
