"""Custom exceptions for GridTable."""


class GridTableError(Exception):
    """Base exception for all GridTable errors."""

    pass


class EmptyRowError(GridTableError):
    """Raised when column bounds are requested from a row without populated cells."""

    pass


class TableNotFoundError(GridTableError):
    """Raised when auto-detection finds no row with data in a sheet."""

    pass


class ColumnHasNoDataError(GridTableError):
    """Raised when an anchor column has no data anywhere in the sheet."""

    pass


class InvalidHeaderError(GridTableError):
    """Raised when a header cell inside the column range is empty."""

    pass


class LabelCountMismatchError(GridTableError):
    """Raised when explicit column labels don't match the column range size."""

    pass


class DuplicateColumnLabelError(GridTableError):
    """Raised when two table columns resolve to the same label."""

    pass


class InvalidColumnLabelError(GridTableError, KeyError):
    """Raised when a table row is indexed by an unknown column label."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""
