"""Global pytest configuration and fixtures."""

import re
from collections import Counter
from collections.abc import Callable
from logging import Logger
from typing import Any

import pytest

from core import setup_test_logging
from core.database.interfaces import DatabaseInterface
from core.types import MetadataRowType


def like_matches(pattern: str, value: str) -> bool:
    """Evaluate a SQL LIKE pattern the way MySQL does (case-insensitive)."""
    regex = ""
    escaped = False
    for char in pattern:
        if escaped:
            regex += re.escape(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "%":
            regex += ".*"
        elif char == "_":
            regex += "."
        else:
            regex += re.escape(char)
    return re.fullmatch(regex, value, flags=re.IGNORECASE | re.DOTALL) is not None


class FakeMetadataSource(DatabaseInterface):
    """In-memory metadata source counting every call."""

    def __init__(
        self,
        indexes: dict[tuple[str, str], list[MetadataRowType]] | None = None,
        engines: dict[str, MetadataRowType] | None = None,
        global_variables: dict[str, Any] | None = None,
        status_variables: dict[str, Any] | None = None,
        values: dict[str, Any] | None = None,
        failing_queries: set[str] | None = None,
        version: int = 80030,
        mariadb: bool = False,
    ) -> None:
        self.indexes = indexes or {}
        self.engines = engines or {}
        self.global_variables = global_variables or {}
        self.status_variables = status_variables or {}
        self.values = values or {}
        self.failing_queries = failing_queries or set()
        self.version = version
        self.mariadb = mariadb
        self.selected_db: str | None = None
        self.calls: Counter[str] = Counter()
        self.queries: list[str] = []

    def get_table_indexes(self, schema: str, table: str) -> list[MetadataRowType]:
        self.calls["get_table_indexes"] += 1
        return [dict(row) for row in self.indexes.get((schema, table), [])]

    def list_storage_engines(self) -> dict[str, MetadataRowType]:
        self.calls["list_storage_engines"] += 1
        return {name: dict(details) for name, details in self.engines.items()}

    def _filter(self, variables: dict[str, Any], like: str | None) -> list[dict[str, Any]]:
        return [
            {"name": name, "value": value}
            for name, value in variables.items()
            if not like or like_matches(like, name)
        ]

    def get_global_variables(self, like: str | None = None) -> list[dict[str, Any]]:
        self.calls["get_global_variables"] += 1
        return self._filter(self.global_variables, like)

    def get_status_variables(self, like: str | None = None) -> list[dict[str, Any]]:
        self.calls["get_status_variables"] += 1
        return self._filter(self.status_variables, like)

    def fetch_value(self, query: str, column: int | str = 0) -> Any:
        self.calls["fetch_value"] += 1
        self.queries.append(query)
        value = self.values.get(query)
        if isinstance(value, dict):
            return value.get(column)
        return value

    def try_query(self, query: str) -> bool:
        self.calls["try_query"] += 1
        self.queries.append(query)
        return query not in self.failing_queries

    def select_db(self, database: str) -> None:
        self.calls["select_db"] += 1
        self.selected_db = database

    def is_mariadb(self) -> bool:
        return self.mariadb

    def get_version(self) -> int:
        return self.version


def index_row(
    key_name: str,
    column: str | None,
    seq: int = 1,
    non_unique: int = 1,
    index_type: str = "BTREE",
    **extra: Any,
) -> MetadataRowType:
    """Build a ``SHOW INDEXES`` row."""
    row: MetadataRowType = {
        "Table": "users",
        "Non_unique": non_unique,
        "Key_name": key_name,
        "Seq_in_index": seq,
        "Column_name": column,
        "Collation": "A",
        "Cardinality": 10,
        "Sub_part": None,
        "Packed": None,
        "Null": "",
        "Index_type": index_type,
        "Comment": "",
        "Index_comment": "",
    }
    row.update(extra)
    return row


def engine_row(name: str, support: str = "YES", comment: str = "") -> MetadataRowType:
    """Build a ``SHOW STORAGE ENGINES`` row."""
    return {
        "Engine": name,
        "Support": support,
        "Comment": comment or f"{name} storage engine",
        "Transactions": "NO",
        "XA": "NO",
        "Savepoints": "NO",
    }


USERS_INDEX_ROWS = [
    index_row("PRIMARY", "id", non_unique=0),
    index_row("email", "email", non_unique=0),
    index_row("idx_name", "last_name", seq=1),
    index_row("idx_name", "first_name", seq=2),
    index_row("idx_name_copy", "last_name", seq=1),
    index_row("idx_name_copy", "first_name", seq=2),
    index_row("ft_bio", "bio", index_type="FULLTEXT", Collation=None),
    index_row("sp_location", "location", index_type="SPATIAL", Sub_part=32),
]

DEFAULT_ENGINES = {
    "InnoDB": engine_row("InnoDB", "DEFAULT", "Supports transactions"),
    "MyISAM": engine_row("MyISAM"),
    "MEMORY": engine_row("MEMORY"),
    "ARCHIVE": engine_row("ARCHIVE"),
    "FEDERATED": engine_row("FEDERATED", "NO"),
    "PERFORMANCE_SCHEMA": engine_row("PERFORMANCE_SCHEMA"),
}


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture(scope="function")
def logger() -> Logger:
    """Provide a logger instance for tests."""
    from core import get_logger

    return get_logger("test")


@pytest.fixture
def make_source() -> Callable[..., FakeMetadataSource]:
    """Factory for in-memory metadata sources."""
    return FakeMetadataSource


@pytest.fixture
def make_index_row() -> Callable[..., MetadataRowType]:
    """Factory for ``SHOW INDEXES`` rows."""
    return index_row


@pytest.fixture
def make_engine_row() -> Callable[..., MetadataRowType]:
    """Factory for ``SHOW STORAGE ENGINES`` rows."""
    return engine_row


@pytest.fixture
def users_index_rows() -> list[MetadataRowType]:
    """Index rows of ``shop.users`` including one duplicate pair."""
    return [dict(row) for row in USERS_INDEX_ROWS]


@pytest.fixture
def index_source(users_index_rows: list[MetadataRowType]) -> FakeMetadataSource:
    """Source holding the indexes of ``shop.users`` and an unindexed table."""
    return FakeMetadataSource(
        indexes={("shop", "users"): users_index_rows, ("shop", "log"): []},
    )


@pytest.fixture
def engine_source() -> FakeMetadataSource:
    """Source with a typical MySQL 8 engine list."""
    return FakeMetadataSource(
        engines={name: dict(row) for name, row in DEFAULT_ENGINES.items()},
        values={"SELECT @@disabled_storage_engines": ""},
    )
