"""Element type inference for materialized table columns."""

from collections.abc import Sequence
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from pydantic import TypeAdapter

# Cell value types that can be validated as typed columns
SCALAR_TYPES: tuple[type, ...] = (str, int, float, bool, datetime, date, time, Decimal)


def infer_eltype(values: Sequence[Any]) -> Any:
    """Infer a single element type for a column of values.

    ``None`` marks a missing value. The result is ``Any`` when the column is
    empty, holds only missing values, or mixes concrete types (``bool`` and
    ``int`` count as different types). Otherwise it is the one concrete type
    ``T`` seen, or ``T | None`` when some values are missing.

    Examples:
        [1, None, 3] -> int | None
        [1, "x", 3]  -> Any
        []           -> Any
    """
    has_missing = False
    eltype: type | None = None

    for value in values:
        if value is None:
            has_missing = True
        elif eltype is None:
            eltype = type(value)
        elif type(value) is not eltype:
            return Any

    if eltype is None:
        return Any
    return eltype | None if has_missing else eltype


def reify_column(values: Sequence[Any], eltype: Any) -> list[Any]:
    """Return ``values`` as a list checked against ``list[eltype]``.

    Validation is strict, so no value is coerced into another type. Columns of
    ``Any`` or of types outside SCALAR_TYPES are copied as they are.
    """
    if eltype is Any or not any(eltype is t or eltype == t | None for t in SCALAR_TYPES):
        return list(values)
    return TypeAdapter(list[eltype]).validate_python(list(values), strict=True)
