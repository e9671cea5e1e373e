"""Row-level access to tables: column index, row views and iteration."""

from .factory import AutoDetect, ExplicitRange, TableLocation, table_row_iterator
from .index import Index, build_index
from .iterator import RowCursor, StopPredicate, TableRowIterator, TableRowIteratorState
from .table_row import TableRow

__all__ = [
    "AutoDetect",
    "ExplicitRange",
    "TableLocation",
    "table_row_iterator",
    "Index",
    "build_index",
    "RowCursor",
    "StopPredicate",
    "TableRowIterator",
    "TableRowIteratorState",
    "TableRow",
]
