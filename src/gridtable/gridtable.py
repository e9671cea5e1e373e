"""Main GridTable class."""

import logging
from typing import Any

from .config import Config
from .core.constants import LOGGING_DEFAULTS
from .extraction.materializer import materialize_table
from .models.sheet_data import RowSource
from .models.table import ColumnRange, Table
from .rows.factory import AutoDetect, TableLocation, table_row_iterator
from .rows.iterator import TableRowIterator
from .utils.logging_context import (
    OperationContext,
    SheetContext,
    TableContext,
    get_contextual_logger,
)

logger = get_contextual_logger(__name__)


class GridTable:
    """Reads tables out of sheets using configured defaults."""

    def __init__(self, config: Config | None = None, **kwargs: Any):
        """Initialize GridTable.

        Args:
            config: Configuration object. If None, loads from environment.
            **kwargs: Config overrides, e.g. ``header=False``
        """
        if config is None:
            config = Config.from_env()

        unknown = sorted(key for key in kwargs if key not in Config.model_fields)
        if unknown:
            raise TypeError(f"Unknown config options: {', '.join(unknown)}")

        self.config = config.model_copy(update=kwargs) if kwargs else config
        self._setup_logging()

        logger.debug(f"GridTable initialized with config: {self.config}")

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        logging.basicConfig(
            level=getattr(logging, self.config.log_level.upper()),
            format=LOGGING_DEFAULTS.FORMAT,
            filename=self.config.log_file,
        )

    def iter_rows(
        self,
        sheet: RowSource,
        location: TableLocation | ColumnRange | str | None = None,
        **options: Any,
    ) -> TableRowIterator:
        """Build a row iterator for a table, filling unset options from config.

        Args:
            sheet: Row source holding the table
            location: Table location; None auto-detects from ``config.first_row``
            **options: Keyword options of ``table_row_iterator``

        Returns:
            TableRowIterator over the table's data rows
        """
        if location is None:
            location = AutoDetect(first_row=self.config.first_row)
        options.setdefault("header", self.config.header)
        options.setdefault("stop_on_empty_row", self.config.stop_on_empty_row)
        return table_row_iterator(sheet, location, **options)

    def read_table(
        self,
        sheet: RowSource,
        location: TableLocation | ColumnRange | str | None = None,
        infer_eltypes: bool | None = None,
        **options: Any,
    ) -> Table:
        """Locate and materialize a table.

        Args:
            sheet: Row source holding the table
            location: Table location; None auto-detects from ``config.first_row``
            infer_eltypes: Override for ``config.infer_eltypes``
            **options: Keyword options of ``table_row_iterator``

        Returns:
            Materialized Table
        """
        if infer_eltypes is None:
            infer_eltypes = self.config.infer_eltypes

        with SheetContext(sheet.name), OperationContext("read_table"):
            itr = self.iter_rows(sheet, location, **options)
            with TableContext(itr.index.column_range.excel_range):
                table = materialize_table(itr, infer_eltypes=infer_eltypes)
                logger.info(f"Read {table.row_count} rows, columns {list(table.column_labels)}")

        return table
