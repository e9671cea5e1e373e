"""Detection strategies for locating tables."""

from .boundary_detector import BoundaryDetector, column_bounds, contiguous_run_end

__all__ = [
    "BoundaryDetector",
    "column_bounds",
    "contiguous_run_end",
]
