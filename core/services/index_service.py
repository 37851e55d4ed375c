"""Service for table index operations."""

from pydantic import BaseModel

from core.constants import DUPLICATE_INDEX_NOTICE
from core.indexes import Index, IndexRegistry
from core.log import get_logger
from core.types import IndexKind, IndexKindFlag

logger = get_logger(__name__)


class DuplicateIndexNotice(BaseModel):
    """Pair of indexes with identical structure."""

    first: str
    second: str
    message: str


class IndexService:
    """Service for index listing and duplicate detection."""

    @staticmethod
    def parse_kinds(kinds: list[str] | None) -> IndexKindFlag:
        """Combine kind names into a filter bitmask.

        An empty or missing list selects every kind.

        Raises:
            ValueError: If a name is not an index kind
        """
        if not kinds:
            return IndexKindFlag.ALL

        mask = IndexKindFlag(0)
        for name in kinds:
            try:
                mask |= IndexKind(name.strip().upper()).flag
            except ValueError:
                raise ValueError(f"Unknown index kind: {name}") from None
        return mask

    def list_indexes(
        self,
        registry: IndexRegistry,
        schema: str,
        table: str,
        kinds: IndexKindFlag | int = IndexKindFlag.ALL,
    ) -> list[Index]:
        """Indexes of a table, optionally filtered by kind."""
        if kinds == IndexKindFlag.ALL:
            return registry.get_all_for_table(schema, table)
        return registry.get_by_kind(schema, table, kinds)

    def get_duplicate_notices(
        self,
        registry: IndexRegistry,
        schema: str,
        table: str,
    ) -> list[DuplicateIndexNotice]:
        """Notices for every pair of equal indexes on a table."""
        notices = [
            DuplicateIndexNotice(
                first=first.name,
                second=second.name,
                message=DUPLICATE_INDEX_NOTICE.format(
                    first=first.name, second=second.name
                ),
            )
            for first, second in registry.find_duplicates(schema, table)
        ]
        if notices:
            logger.info(f"{len(notices)} duplicate indexes on {schema}.{table}")
        return notices
