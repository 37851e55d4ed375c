"""Common type definitions for the dbadmin system."""

from enum import Enum, IntEnum, IntFlag
from typing import Any, TypeAlias

MetadataRowType: TypeAlias = dict[str, Any]


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class IndexKind(str, Enum):
    """Index choice as shown to the user."""

    PRIMARY = "PRIMARY"
    UNIQUE = "UNIQUE"
    INDEX = "INDEX"
    SPATIAL = "SPATIAL"
    FULLTEXT = "FULLTEXT"

    @property
    def flag(self) -> "IndexKindFlag":
        """Bit used for this kind in kind filters."""
        return IndexKindFlag[self.value]


class IndexKindFlag(IntFlag):
    """Bitmask over index kinds."""

    PRIMARY = 1
    UNIQUE = 2
    INDEX = 4
    SPATIAL = 8
    FULLTEXT = 16
    ALL = 31


class SupportLevel(IntEnum):
    """Storage engine availability on the connected server."""

    NOT_SUPPORTED = 0
    DISABLED = 1
    SUPPORTED = 2
    DEFAULT = 3

    @classmethod
    def from_server(cls, value: str | None) -> "SupportLevel":
        """Map the ``Support`` column of ``SHOW STORAGE ENGINES``."""
        mapping = {
            "DEFAULT": cls.DEFAULT,
            "YES": cls.SUPPORTED,
            "DISABLED": cls.DISABLED,
        }
        return mapping.get((value or "").upper(), cls.NOT_SUPPORTED)


class VariableKind(IntEnum):
    """How an engine variable value should be formatted."""

    PLAINTEXT = 0
    SIZE = 1
    NUMERIC = 2
    BOOLEAN = 3
