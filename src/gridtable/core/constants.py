"""Centralized constants for GridTable.

Defaults used by the configuration model and the table factory live here so
both agree on the same values.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class TableDefaults:
    """Default options for locating and reading a table."""

    HEADER: Final[bool] = True
    STOP_ON_EMPTY_ROW: Final[bool] = True
    INFER_ELTYPES: Final[bool] = False

    # Auto-detection starts scanning at this physical row
    FIRST_ROW: Final[int] = 1


@dataclass(frozen=True)
class ExcelLimits:
    """Spreadsheet grid limits (1-based, inclusive)."""

    MAX_ROWS: Final[int] = 1048576
    MAX_COLS: Final[int] = 16384  # column XFD


@dataclass(frozen=True)
class LoggingDefaults:
    """Defaults for log configuration."""

    LEVEL: Final[str] = "INFO"
    FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Environment variable prefix read by Config.from_env
ENV_PREFIX: Final[str] = "GRIDTABLE_"


# Create singleton instances for easy access
TABLE_DEFAULTS = TableDefaults()
EXCEL_LIMITS = ExcelLimits()
LOGGING_DEFAULTS = LoggingDefaults()
