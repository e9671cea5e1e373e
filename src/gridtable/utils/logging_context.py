"""Context-aware logging utilities for GridTable."""

import contextvars
import logging
from collections.abc import Mapping
from typing import Any

# Context variables for tracking what is currently being read
current_sheet = contextvars.ContextVar[str | None]("current_sheet", default=None)
current_table = contextvars.ContextVar[str | None]("current_table", default=None)
current_operation = contextvars.ContextVar[str | None]("current_operation", default=None)

_CONTEXT_VARS = {
    "sheet": current_sheet,
    "table": current_table,
    "op": current_operation,
}


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with the active sheet/table/operation."""

    def process(self, msg: str, kwargs: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
        """Add context information to log records."""
        extra = dict(kwargs.get("extra") or {})
        context_parts = []

        for key, var in _CONTEXT_VARS.items():
            value = var.get()
            if value:
                extra[key] = value
                context_parts.append(f"{key}={value}")

        kwargs["extra"] = extra
        if context_parts:
            msg = f"[{', '.join(context_parts)}] {msg}"

        return msg, kwargs


def get_contextual_logger(name: str) -> ContextualLogger:
    """Get a logger that automatically includes context information.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logging.getLogger(name), {})


class _ContextVarScope:
    """Sets a context variable for the duration of a ``with`` block."""

    var: contextvars.ContextVar[str | None]

    def __init__(self, value: str):
        self.value = value
        self.token = None

    def __enter__(self):
        self.token = self.var.set(self.value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            self.var.reset(self.token)
            self.token = None


class SheetContext(_ContextVarScope):
    """Context manager for tracking the sheet being read."""

    var = current_sheet


class TableContext(_ContextVarScope):
    """Context manager for tracking the table range being read (e.g. 'B:D')."""

    var = current_table


class OperationContext(_ContextVarScope):
    """Context manager for tracking the current operation."""

    var = current_operation
