"""MEMORY (HEAP) storage engine."""

from core.engines.base import StorageEngine
from core.engines.models import EngineVariable
from core.types import VariableKind


class Memory(StorageEngine):
    def get_variables(self) -> dict[str, EngineVariable]:
        return {"max_heap_table_size": EngineVariable(kind=VariableKind.SIZE)}
