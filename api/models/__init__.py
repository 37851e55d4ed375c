"""API models package."""

from .engines import EngineListResponse
from .indexes import (
    DuplicateIndexesResponse,
    IndexColumnResponse,
    IndexResponse,
    TableIndexesResponse,
)

__all__ = [
    "DuplicateIndexesResponse",
    "EngineListResponse",
    "IndexColumnResponse",
    "IndexResponse",
    "TableIndexesResponse",
]
