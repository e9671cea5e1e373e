"""GridTable - Read labeled tables out of sparse spreadsheet grids."""

__version__ = "0.1.0"

from gridtable.config import Config
from gridtable.extraction import gettable, infer_eltype, materialize_table
from gridtable.gridtable import GridTable
from gridtable.models import CellData, ColumnRange, SheetData, Table
from gridtable.rows import AutoDetect, ExplicitRange, TableRow, TableRowIterator, table_row_iterator

__all__ = [
    "GridTable",
    "Config",
    "CellData",
    "SheetData",
    "ColumnRange",
    "Table",
    "AutoDetect",
    "ExplicitRange",
    "TableRow",
    "TableRowIterator",
    "table_row_iterator",
    "gettable",
    "materialize_table",
    "infer_eltype",
]
