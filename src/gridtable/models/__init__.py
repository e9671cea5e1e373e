"""Data models for GridTable."""

from .sheet_data import MISSING_CELL, CellData, CellValue, RowSource, SheetData, SheetRow
from .table import ColumnRange, Table, TableBounds

__all__ = [
    "CellData",
    "CellValue",
    "MISSING_CELL",
    "RowSource",
    "SheetData",
    "SheetRow",
    "ColumnRange",
    "TableBounds",
    "Table",
]
