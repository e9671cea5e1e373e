"""Materialize a table row iterator into column-oriented storage."""

import logging
from typing import Any

from ..models.table import Table
from ..rows.iterator import TableRowIterator
from .type_inference import infer_eltype, reify_column

logger = logging.getLogger(__name__)


def _collect_columns(itr: TableRowIterator) -> list[list[Any]]:
    columns: list[list[Any]] = [[] for _ in range(itr.table_columns_count)]
    dropped = 0

    for table_row in itr:
        is_empty_row = True
        for column, value in zip(columns, table_row, strict=True):
            column.append(value)
            if value is not None:
                is_empty_row = False

        # rows with no value in any table column don't belong in the result
        if is_empty_row:
            for column in columns:
                column.pop()
            dropped += 1

    if dropped:
        logger.debug(f"Dropped {dropped} blank rows from table")
    return columns


def gettable(
    itr: TableRowIterator, infer_eltypes: bool = False
) -> tuple[list[list[Any]], list[str]]:
    """Read every row of ``itr`` into one list per column.

    Args:
        itr: Table row iterator to drain
        infer_eltypes: Check each column against its inferred element type

    Returns:
        Tuple of (columns, column labels)
    """
    table = materialize_table(itr, infer_eltypes=infer_eltypes)
    return table.columns, table.column_labels


def materialize_table(itr: TableRowIterator, infer_eltypes: bool = False) -> Table:
    """Read every row of ``itr`` into a Table.

    When ``infer_eltypes`` is set, ``Table.column_types`` holds the element type
    inferred for each column.
    """
    columns = _collect_columns(itr)
    column_types = None

    if infer_eltypes:
        column_types = [infer_eltype(column) for column in columns]
        columns = [
            reify_column(column, eltype)
            for column, eltype in zip(columns, column_types, strict=True)
        ]

    table = Table(
        columns=columns, column_labels=list(itr.column_labels), column_types=column_types
    )
    logger.info(f"Materialized table with shape {table.shape}")
    return table
