"""Factory for building table row iterators from a table location."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..core.constants import TABLE_DEFAULTS
from ..detectors.boundary_detector import BoundaryDetector
from ..models.table import ColumnRange
from .index import build_index
from .iterator import StopPredicate, TableRowIterator

if TYPE_CHECKING:
    from ..models.sheet_data import RowSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExplicitRange:
    """Table whose columns are known.

    Attributes:
        columns: Column range, as a ColumnRange or ``"B:D"`` notation
        first_row: Header row (or first data row without header); when None,
            the first row with data in the range's first column
    """

    columns: ColumnRange | str
    first_row: int | None = None


@dataclass(frozen=True)
class AutoDetect:
    """Table located by scanning the sheet from ``first_row`` downwards."""

    first_row: int = TABLE_DEFAULTS.FIRST_ROW


TableLocation = ExplicitRange | AutoDetect


def _resolve_location(
    sheet: "RowSource", location: TableLocation
) -> tuple[ColumnRange, int]:
    detector = BoundaryDetector(sheet)

    if isinstance(location, AutoDetect):
        bounds = detector.detect(first_row=location.first_row)
        return bounds.column_range, bounds.first_row

    if isinstance(location, ExplicitRange):
        column_range = ColumnRange.parse(location.columns)
        first_row = location.first_row
        if first_row is None:
            first_row = detector.first_row_with_data(column_range.start)
        return column_range, first_row

    raise TypeError(f"Unsupported table location: {location!r}")


def table_row_iterator(
    sheet: "RowSource",
    location: TableLocation | ColumnRange | str | None = None,
    *,
    column_labels: Sequence[Any] | None = None,
    header: bool = TABLE_DEFAULTS.HEADER,
    stop_on_empty_row: bool = TABLE_DEFAULTS.STOP_ON_EMPTY_ROW,
    stop_predicate: StopPredicate | None = None,
) -> TableRowIterator:
    """Build a TableRowIterator for a table on ``sheet``.

    Args:
        sheet: Row source holding the table
        location: ExplicitRange or AutoDetect; a ColumnRange or ``"B:D"`` string
            is read as ExplicitRange and None as AutoDetect()
        column_labels: Labels replacing the header row or generated column names
        header: Whether the table's first row holds the column labels
        stop_on_empty_row: Whether a blank or skipped row ends the table
        stop_predicate: Called with each candidate TableRow; True ends the table

    Returns:
        TableRowIterator over the table's data rows

    Raises:
        TableNotFoundError: If auto-detection finds no data
        ColumnHasNoDataError: If the first column of an explicit range has no data
        InvalidHeaderError: If a header cell is empty
        LabelCountMismatchError: If ``column_labels`` doesn't match the range size
    """
    if location is None:
        location = AutoDetect()
    elif isinstance(location, ColumnRange | str):
        location = ExplicitRange(columns=location)

    column_range, first_row = _resolve_location(sheet, location)
    index = build_index(sheet, column_range, first_row, header, column_labels)
    first_data_row = first_row + 1 if header else first_row

    logger.info(
        f"Reading table {column_range.excel_range} from sheet {sheet.name!r}, "
        f"data starting at row {first_data_row}"
    )
    return TableRowIterator(
        sheet,
        index,
        first_data_row,
        stop_on_empty_row=stop_on_empty_row,
        stop_predicate=stop_predicate,
    )
