"""Column index mapping table columns to sheet columns and labels."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ..core.exceptions import (
    DuplicateColumnLabelError,
    InvalidColumnLabelError,
    InvalidHeaderError,
    LabelCountMismatchError,
)
from ..models.table import ColumnRange
from ..utils.excel_utils import get_column_letter, to_excel_address

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..models.sheet_data import RowSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Index:
    """Immutable mapping between table column ordinals (1-based), labels and sheet columns."""

    column_range: ColumnRange
    column_labels: tuple[str, ...]
    column_map: tuple[int, ...] = field(init=False, compare=False)
    lookup: "Mapping[str, int]" = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.column_labels) != self.column_range.size:
            raise LabelCountMismatchError(
                f"`column_range` (length={self.column_range.size}) and `column_labels` "
                f"(length={len(self.column_labels)}) must have the same length."
            )

        lookup: dict[str, int] = {}
        for ordinal, label in enumerate(self.column_labels, start=1):
            if label in lookup:
                raise DuplicateColumnLabelError(f"Duplicate column label: {label}.")
            lookup[label] = ordinal

        object.__setattr__(self, "column_map", tuple(self.column_range.columns))
        object.__setattr__(self, "lookup", MappingProxyType(lookup))

    @property
    def table_columns_count(self) -> int:
        return len(self.column_labels)

    def table_column_numbers(self) -> range:
        """Table column ordinals, 1..N."""
        return range(1, self.table_columns_count + 1)

    def sheet_column_numbers(self) -> tuple[int, ...]:
        """Physical sheet columns covered by the table, in table order."""
        return self.column_map

    def table_column_to_sheet_column_number(self, ordinal: int) -> int:
        """Map a table column ordinal to its physical sheet column."""
        return self.column_map[self._position(ordinal)]

    def get_column_label(self, ordinal: int) -> str:
        return self.column_labels[self._position(ordinal)]

    def ordinal_for(self, label: str) -> int:
        """Table column ordinal for ``label``.

        Raises:
            InvalidColumnLabelError: If no column has this label
        """
        try:
            return self.lookup[label]
        except KeyError:
            raise InvalidColumnLabelError(f"Invalid column label: {label}.") from None

    def _position(self, ordinal: int) -> int:
        if isinstance(ordinal, bool) or not 1 <= ordinal <= self.table_columns_count:
            raise IndexError(
                f"Table column {ordinal} out of range 1:{self.table_columns_count}"
            )
        return ordinal - 1


def _read_header_labels(
    sheet: "RowSource", column_range: ColumnRange, header_row: int
) -> tuple[str, ...]:
    row = sheet.get_row(header_row)
    if row is None:
        raise InvalidHeaderError(f"Header row {header_row} doesn't exist.")

    labels = []
    for column in column_range.columns:
        value = row.get_value(column)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise InvalidHeaderError(
                f"Header cell can't be empty: {to_excel_address(header_row, column)}."
            )
        labels.append(str(value))
    return tuple(labels)


def build_index(
    sheet: "RowSource",
    column_range: ColumnRange,
    first_row: int,
    header: bool,
    column_labels: Sequence[Any] | None = None,
) -> Index:
    """Resolve column labels and build the table's Index.

    Labels come from, in order of precedence: ``column_labels`` when given,
    the header row when ``header`` is set, or the column letters otherwise.

    Raises:
        InvalidHeaderError: If a header cell in the range is empty
        LabelCountMismatchError: If explicit labels don't match the range size
        DuplicateColumnLabelError: If two columns end up with the same label
    """
    if column_labels:
        labels = tuple(str(label) for label in column_labels)
    elif header:
        labels = _read_header_labels(sheet, column_range, first_row)
    else:
        labels = tuple(get_column_letter(column) for column in column_range.columns)

    index = Index(column_range=column_range, column_labels=labels)
    logger.debug(f"Built index for columns {column_range.excel_range}: {list(labels)}")
    return index
