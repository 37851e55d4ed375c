"""Application constants and configuration values."""

from typing import Final

# Index name the server reserves for the primary key
PRIMARY_INDEX_NAME: Final[str] = "PRIMARY"

# Index methods offered when creating an index
INDEX_METHODS: Final[list[str]] = ["BTREE", "HASH"]

DUPLICATE_INDEX_NOTICE: Final[str] = (
    "The indexes {first} and {second} seem to be equal and one of them "
    "could possibly be removed."
)

# Engine accepted by is_valid() even when the server does not list it
LEGACY_ENGINE_ALIAS: Final[str] = "PBMS"

# Engine never offered in engine pickers (MySQL 5.5+)
HIDDEN_ENGINE: Final[str] = "PERFORMANCE_SCHEMA"

# First MySQL version exposing @@disabled_storage_engines (5.7.8)
DISABLED_ENGINES_MIN_VERSION: Final[int] = 50708

# Cache keys
DISABLED_ENGINES_CACHE_KEY: Final[str] = "storage-engine.disabled"
MROONGA_AVAILABLE_CACHE_KEY: Final[str] = "storage-engine.mroonga.has.mroonga_command"
MROONGA_OBJECT_LIST_CACHE_PREFIX: Final[str] = "storage-engine.mroonga.object_list."

# Groonga object type ids kept from object_list: table types (48-51)
# and column types (64, 65, 72)
MROONGA_OBJECT_TYPE_IDS: Final[frozenset[int]] = frozenset(
    {48, 49, 50, 51, 64, 65, 72}
)

SUPPORT_MESSAGES: Final[dict[int, str]] = {
    3: "{title} is the default storage engine on this MySQL server.",
    2: "{title} is available on this MySQL server.",
    1: "{title} has been disabled for this MySQL server.",
    0: "This MySQL server does not support the {title} storage engine.",
}

BYTE_UNITS: Final[list[str]] = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]
