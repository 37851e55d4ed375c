"""Key/value cache for expensive metadata lookups."""

from collections.abc import Callable
from typing import Any, TypeVar

from core.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_MISSING = object()


class MetadataCache:
    """In-memory cache scoped to one request or session.

    Entries never expire; drop the cache together with its owner.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def has(self, key: str) -> bool:
        """Check whether a value is stored under ``key``."""
        return key in self._entries

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value or ``default``."""
        return self._entries.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self._entries[key] = value

    def remove(self, key: str) -> None:
        """Forget ``key`` if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Forget every entry."""
        self._entries.clear()

    def remember(self, key: str, factory: Callable[[], T]) -> T:
        """Return the cached value, computing and storing it on a miss.

        Nothing is stored when ``factory`` raises.
        """
        value = self._entries.get(key, _MISSING)
        if value is not _MISSING:
            logger.debug(f"Cache hit: {key}")
            return value  # type: ignore[no-any-return]

        logger.debug(f"Cache miss: {key}")
        computed = factory()
        self._entries[key] = computed
        return computed

    def __len__(self) -> int:
        return len(self._entries)
