"""Turning table rows into column-oriented tables."""

from .materializer import gettable, materialize_table
from .type_inference import infer_eltype, reify_column

__all__ = [
    "gettable",
    "materialize_table",
    "infer_eltype",
    "reify_column",
]
