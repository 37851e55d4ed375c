"""Table index metadata model."""

from .column import IndexColumn
from .index import Index, IndexParams
from .registry import IndexRegistry

__all__ = [
    "Index",
    "IndexColumn",
    "IndexParams",
    "IndexRegistry",
]
