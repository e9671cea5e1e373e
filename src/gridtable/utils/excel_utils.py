"""Helpers for converting between column numbers and Excel column letters.

Column numbers are 1-based: column 1 is ``A``, column 27 is ``AA``.
"""

import re

from ..core.constants import EXCEL_LIMITS

_COLUMN_LETTERS_RE = re.compile(r"^[A-Z]{1,3}$")


def get_column_letter(column: int) -> str:
    """Convert a 1-based column number to its Excel letters (e.g. 28 -> 'AB')."""
    if not 1 <= column <= EXCEL_LIMITS.MAX_COLS:
        raise ValueError(f"Column number out of range: {column}")

    result = ""
    while column > 0:
        column, remainder = divmod(column - 1, 26)
        result = chr(remainder + ord("A")) + result
    return result


def column_index_from_letter(letters: str) -> int:
    """Convert Excel column letters to a 1-based column number (e.g. 'AB' -> 28)."""
    normalized = letters.strip().upper()
    if not _COLUMN_LETTERS_RE.match(normalized):
        raise ValueError(f"Invalid column name: {letters!r}")

    column = 0
    for char in normalized:
        column = column * 26 + (ord(char) - ord("A") + 1)

    if column > EXCEL_LIMITS.MAX_COLS:
        raise ValueError(f"Column name out of range: {letters!r}")
    return column


def parse_column_range(text: str) -> tuple[int, int]:
    """Parse a column range such as ``"B:D"`` or ``"C"`` into column numbers.

    Args:
        text: Range expression with one or two column names

    Returns:
        Tuple of (start, stop) column numbers, inclusive

    Raises:
        ValueError: If the expression is malformed
    """
    parts = text.split(":")
    if len(parts) == 1:
        column = column_index_from_letter(parts[0])
        return column, column
    if len(parts) == 2:
        return column_index_from_letter(parts[0]), column_index_from_letter(parts[1])
    raise ValueError(f"Invalid column range: {text!r}")


def to_excel_address(row: int, column: int) -> str:
    """Build an A1-style address from 1-based row and column numbers."""
    return f"{get_column_letter(column)}{row}"
