"""Core definitions shared across GridTable."""

from .exceptions import (
    ColumnHasNoDataError,
    DuplicateColumnLabelError,
    EmptyRowError,
    GridTableError,
    InvalidColumnLabelError,
    InvalidHeaderError,
    LabelCountMismatchError,
    TableNotFoundError,
)

__all__ = [
    "GridTableError",
    "EmptyRowError",
    "TableNotFoundError",
    "ColumnHasNoDataError",
    "InvalidHeaderError",
    "LabelCountMismatchError",
    "DuplicateColumnLabelError",
    "InvalidColumnLabelError",
]
