"""Mroonga storage engine."""

from core.constants import MROONGA_OBJECT_LIST_CACHE_PREFIX, MROONGA_OBJECT_TYPE_IDS
from core.engines.base import StorageEngine
from core.log import get_logger
from core.utils import escape_bind_markers, parse_json_object, to_int

logger = get_logger(__name__)

OBJECT_LIST_QUERY = "SELECT mroonga_command('object_list');"


def _object_inspect_query(object_name: str) -> str:
    escaped = escape_bind_markers(object_name.replace("'", "''"))
    return f"SELECT mroonga_command('object_inspect {escaped}');"


class Mroonga(StorageEngine):
    """Mroonga engine; stores tables and indexes as Groonga objects."""

    def _load_object_names(self) -> list[str]:
        """Names of the table and column objects of the current database."""
        objects = parse_json_object(self.source.fetch_value(OBJECT_LIST_QUERY)) or {}
        names: list[str] = []
        for name, details in objects.items():
            object_type = details.get("type") if isinstance(details, dict) else None
            type_id = to_int(object_type.get("id")) if isinstance(object_type, dict) else None
            if type_id in MROONGA_OBJECT_TYPE_IDS:
                names.append(name)
        return names

    def get_object_disk_usage(self, database: str, table: str) -> tuple[int, int]:
        """Disk usage of a Mroonga table split into data and index bytes.

        The object catalog of ``database`` is cached for the registry's
        lifetime. Objects named ``<table>#<table>...`` hold index data.

        Returns:
            Tuple of (data_bytes, index_bytes)
        """
        self.source.select_db(database)
        object_names: list[str] = self.registry.cache.remember(
            MROONGA_OBJECT_LIST_CACHE_PREFIX + database, self._load_object_names
        )

        data_bytes = 0
        index_bytes = 0
        index_prefix = f"{table}#{table}"
        for object_name in object_names:
            if not object_name.startswith(table):
                continue

            inspected = parse_json_object(
                self.source.fetch_value(_object_inspect_query(object_name))
            )
            if inspected is None:
                logger.warning(f"Could not inspect Mroonga object {object_name}")
                continue

            usage = to_int(inspected.get("disk_usage"), 0) or 0
            if object_name.startswith(index_prefix):
                index_bytes += usage
            else:
                data_bytes += usage

        return data_bytes, index_bytes
