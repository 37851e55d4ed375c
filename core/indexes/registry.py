"""Request-scoped registry of table indexes."""

from core.constants import PRIMARY_INDEX_NAME
from core.database.interfaces import DatabaseInterface
from core.indexes.index import Index, IndexParams
from core.log import get_logger
from core.types import IndexKind, IndexKindFlag

logger = get_logger(__name__)


class IndexRegistry:
    """Loads and caches the indexes of tables, schema -> table -> name.

    A table is loaded at most once per registry. A table that is present in
    the mapping has been loaded, even when it has no indexes. Indexes stay
    cached for the registry's lifetime; create a new registry to see
    schema changes.
    """

    def __init__(
        self,
        source: DatabaseInterface,
        legacy_fulltext_filter: bool = False,
    ) -> None:
        """Initialize the registry.

        Args:
            source: Metadata source queried for ``SHOW INDEXES`` rows
            legacy_fulltext_filter: Use the legacy guard clause for the
                FULLTEXT check in ``get_by_kind``
        """
        self.source = source
        self.legacy_fulltext_filter = legacy_fulltext_filter
        self._registry: dict[str, dict[str, dict[str, Index]]] = {}

    def is_loaded(self, schema: str, table: str) -> bool:
        return table in self._registry.get(schema, {})

    def load_all(self, schema: str, table: str) -> None:
        """Load the indexes of a table unless they are already cached.

        The table entry is committed only after every row was processed, so
        a failing source leaves the table unloaded.
        """
        if self.is_loaded(schema, table):
            logger.debug(f"Indexes of {schema}.{table} already loaded")
            return

        rows = self.source.get_table_indexes(schema, table)
        indexes: dict[str, Index] = {}
        for row in rows:
            row = {**row, "Schema": schema, "Table": table}
            key_name = str(row.get("Key_name") or "")
            index = indexes.get(key_name)
            if index is None:
                index = Index(row)
                indexes[key_name] = index
            index.add_column(row)

        self._registry.setdefault(schema, {})[table] = indexes
        logger.debug(f"Loaded {len(indexes)} indexes of {schema}.{table}")

    def get_or_create(self, schema: str, table: str, index_name: str = "") -> Index:
        """Return the named index, registering a new empty one if needed.

        An empty name yields a fresh, unregistered placeholder.
        """
        self.load_all(schema, table)
        indexes = self._registry[schema][table]
        if index_name in indexes:
            return indexes[index_name]

        index = Index(IndexParams(Schema=schema, Table=table))
        if index_name != "":
            index.set_name(index_name)
            indexes[index.name] = index
            logger.debug(f"Registered new index {index_name} on {schema}.{table}")
        return index

    def get_all_for_table(self, schema: str, table: str) -> list[Index]:
        """All indexes of a table in the order the server returned them."""
        self.load_all(schema, table)
        return list(self._registry[schema][table].values())

    def get_by_kind(
        self,
        schema: str,
        table: str,
        kinds: IndexKindFlag | int = IndexKindFlag.ALL,
    ) -> list[Index]:
        """Indexes of a table whose kind is selected by the ``kinds`` bitmask."""
        selected: list[Index] = []
        for index in self.get_all_for_table(schema, table):
            for kind in (
                IndexKind.PRIMARY,
                IndexKind.UNIQUE,
                IndexKind.INDEX,
                IndexKind.SPATIAL,
            ):
                if kinds & kind.flag and index.kind == kind:
                    selected.append(index)

            if self.legacy_fulltext_filter:
                # Guard clause form of the FULLTEXT check used by older releases
                if not kinds & IndexKindFlag.FULLTEXT or index.kind != IndexKind.FULLTEXT:
                    continue
                selected.append(index)
            elif kinds & IndexKindFlag.FULLTEXT and index.kind == IndexKind.FULLTEXT:
                selected.append(index)
        return selected

    def get_primary(self, schema: str, table: str) -> Index | None:
        self.load_all(schema, table)
        return self._registry[schema][table].get(PRIMARY_INDEX_NAME)

    def has_primary(self, schema: str, table: str) -> bool:
        return self.get_primary(schema, table) is not None

    def find_duplicates(self, schema: str, table: str) -> list[tuple[Index, Index]]:
        """Find pairs of indexes with identical structure.

        The last index is popped and compared with the remaining ones; only
        its first match is reported. Pairs are (remaining, popped).
        """
        stack = self.get_all_for_table(schema, table)
        duplicates: list[tuple[Index, Index]] = []
        if len(stack) < 2:
            return duplicates

        while stack:
            popped = stack.pop()
            popped_view = popped.comparable_view()
            for candidate in stack:
                if candidate.comparable_view() == popped_view:
                    duplicates.append((candidate, popped))
                    break

        if duplicates:
            logger.debug(f"Found {len(duplicates)} duplicate indexes on {schema}.{table}")
        return duplicates
