"""Utility functions for GridTable."""

from .excel_utils import (
    column_index_from_letter,
    get_column_letter,
    parse_column_range,
    to_excel_address,
)
from .logging_context import (
    OperationContext,
    SheetContext,
    TableContext,
    get_contextual_logger,
)

__all__ = [
    "get_column_letter",
    "column_index_from_letter",
    "parse_column_range",
    "to_excel_address",
    "get_contextual_logger",
    "SheetContext",
    "TableContext",
    "OperationContext",
]
