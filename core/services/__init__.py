"""Core services package."""

from .engine_service import EngineService
from .index_service import DuplicateIndexNotice, IndexService

__all__ = [
    "DuplicateIndexNotice",
    "EngineService",
    "IndexService",
]
