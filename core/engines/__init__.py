"""Storage engine descriptors and registry."""

from .base import StorageEngine
from .models import EngineDetails, EnginePage, EngineSummary, EngineVariable, VariableStatus
from .registry import ENGINE_CLASSES, StorageEngineRegistry

__all__ = [
    "ENGINE_CLASSES",
    "EngineDetails",
    "EnginePage",
    "EngineSummary",
    "EngineVariable",
    "StorageEngine",
    "StorageEngineRegistry",
    "VariableStatus",
]
