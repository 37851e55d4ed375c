"""Storage engine registry."""

from typing import Any

from core.cache import MetadataCache
from core.constants import (
    DISABLED_ENGINES_CACHE_KEY,
    DISABLED_ENGINES_MIN_VERSION,
    HIDDEN_ENGINE,
    LEGACY_ENGINE_ALIAS,
    MROONGA_AVAILABLE_CACHE_KEY,
)
from core.database.interfaces import DatabaseInterface
from core.engines.base import StorageEngine
from core.engines.concrete import (
    Bdb,
    Berkeleydb,
    Binlog,
    Innobase,
    Innodb,
    Memory,
    Merge,
    MrgMyisam,
    Mroonga,
    Myisam,
    Ndbcluster,
    Pbxt,
    PerformanceSchema,
)
from core.engines.models import EngineSummary
from core.log import get_logger
from core.types import SupportLevel
from core.utils import to_str

logger = get_logger(__name__)

# Lower-cased engine id -> descriptor class
ENGINE_CLASSES: dict[str, type[StorageEngine]] = {
    "bdb": Bdb,
    "berkeleydb": Berkeleydb,
    "binlog": Binlog,
    "innobase": Innobase,
    "innodb": Innodb,
    "memory": Memory,
    "merge": Merge,
    "mrg_myisam": MrgMyisam,
    "mroonga": Mroonga,
    "myisam": Myisam,
    "ndbcluster": Ndbcluster,
    "pbxt": Pbxt,
    "performance_schema": PerformanceSchema,
}


class StorageEngineRegistry:
    """Resolves engine names to descriptors for one request or session.

    The server's engine list is fetched once per registry. The disabled
    engine list and the Mroonga availability checks go through ``cache``.
    """

    def __init__(
        self,
        source: DatabaseInterface,
        cache: MetadataCache | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            source: Metadata source for engine lists and variables
            cache: Cache shared with other request-scoped components
        """
        self.source = source
        self.cache = cache if cache is not None else MetadataCache()
        self._engines: dict[str, dict[str, Any]] | None = None

    def _supports_disabled_engines(self) -> bool:
        return (
            not self.source.is_mariadb()
            and self.source.get_version() >= DISABLED_ENGINES_MIN_VERSION
        )

    def _fetch_disabled_engines(self) -> list[str]:
        value = to_str(self.source.fetch_value("SELECT @@disabled_storage_engines"), "")
        return [name.strip() for name in (value or "").split(",") if name.strip()]

    def list_all(self) -> dict[str, dict[str, Any]]:
        """Engines reported by the server, keyed by engine name.

        Engines named in ``@@disabled_storage_engines`` are reported with
        ``Support`` set to ``DISABLED``.
        """
        if self._engines is not None:
            return self._engines

        engines = {
            name: dict(details)
            for name, details in self.source.list_storage_engines().items()
        }
        if self._supports_disabled_engines():
            disabled = self.cache.remember(
                DISABLED_ENGINES_CACHE_KEY, self._fetch_disabled_engines
            )
            by_lower_name = {name.lower(): name for name in engines}
            for disabled_name in disabled:
                name = by_lower_name.get(disabled_name.lower())
                if name is not None:
                    engines[name]["Support"] = "DISABLED"

        self._engines = engines
        logger.debug(f"Loaded {len(engines)} storage engines")
        return engines

    def find_engine(self, engine_id: str) -> dict[str, Any] | None:
        """Server details of an engine, matched case-insensitively."""
        engines = self.list_all()
        if engine_id in engines:
            return engines[engine_id]
        lowered = engine_id.lower()
        for name, details in engines.items():
            if name.lower() == lowered:
                return details
        return None

    def resolve(self, engine_id: str) -> StorageEngine:
        """Descriptor for ``engine_id``; unknown engines get the generic one."""
        engine_class = ENGINE_CLASSES.get(engine_id.lower(), StorageEngine)
        return engine_class(engine_id, self)

    def is_valid(self, engine_id: str) -> bool:
        """Check whether the server lists ``engine_id``."""
        if engine_id == LEGACY_ENGINE_ALIAS:
            return True
        return engine_id in self.list_all()

    def to_display_list(self) -> list[EngineSummary]:
        """Engines that can be picked for a table."""
        summaries: list[EngineSummary] = []
        for details in self.list_all().values():
            support = SupportLevel.from_server(to_str(details.get("Support")))
            name = to_str(details.get("Engine"), "") or ""
            if support in (SupportLevel.NOT_SUPPORTED, SupportLevel.DISABLED):
                continue
            if name == HIDDEN_ENGINE:
                continue
            summaries.append(
                EngineSummary(
                    name=name,
                    comment=to_str(details.get("Comment"), "") or "",
                    is_default=support == SupportLevel.DEFAULT,
                )
            )
        return summaries

    def has_mroonga_engine(self) -> bool:
        """Check whether Mroonga commands work on the server."""
        return bool(
            self.cache.remember(
                MROONGA_AVAILABLE_CACHE_KEY,
                lambda: self.source.try_query("SELECT mroonga_command('object_list');"),
            )
        )
