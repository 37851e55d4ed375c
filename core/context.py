"""Request-scoped metadata context."""

from core.cache import MetadataCache
from core.database.interfaces import DatabaseInterface
from core.engines import StorageEngineRegistry
from core.indexes import IndexRegistry


class RequestContext:
    """Caches and registries shared by one request.

    Nothing here outlives the request, so schema changes made between
    requests are always visible.
    """

    def __init__(
        self,
        source: DatabaseInterface,
        legacy_fulltext_filter: bool = False,
    ) -> None:
        self.source = source
        self.cache = MetadataCache()
        self.indexes = IndexRegistry(source, legacy_fulltext_filter)
        self.engines = StorageEngineRegistry(source, self.cache)
