"""Metadata source interface consumed by the index and engine registries."""

from abc import ABC, abstractmethod
from typing import Any

from core.log import get_logger
from core.types import MetadataRowType

logger = get_logger(__name__)


class DatabaseInterface(ABC):
    """Abstract read-only view of a database server's metadata.

    Implementations own connection handling, timeouts and retries. Errors
    raised by the underlying driver are propagated unchanged.
    """

    @abstractmethod
    def get_table_indexes(self, schema: str, table: str) -> list[MetadataRowType]:
        """Fetch the raw index rows of a table.

        Rows follow ``SHOW INDEXES`` naming (``Key_name``, ``Column_name``,
        ``Seq_in_index`` ...) and keep the server's ordering, so the rows of
        one index are contiguous.

        Args:
            schema: Database (schema) name
            table: Table name

        Returns:
            List of rows as dictionaries
        """
        pass

    @abstractmethod
    def list_storage_engines(self) -> dict[str, MetadataRowType]:
        """Fetch ``SHOW STORAGE ENGINES`` keyed by the ``Engine`` column.

        Returns:
            Mapping of engine name to its ``Engine``/``Support``/``Comment`` row
        """
        pass

    @abstractmethod
    def get_global_variables(self, like: str | None = None) -> list[dict[str, Any]]:
        """Fetch global server variables.

        Args:
            like: Optional SQL LIKE pattern applied to variable names

        Returns:
            List of ``{"name": ..., "value": ...}`` dictionaries
        """
        pass

    @abstractmethod
    def get_status_variables(self, like: str | None = None) -> list[dict[str, Any]]:
        """Fetch global status counters.

        Args:
            like: Optional SQL LIKE pattern applied to variable names

        Returns:
            List of ``{"name": ..., "value": ...}`` dictionaries
        """
        pass

    @abstractmethod
    def fetch_value(self, query: str, column: int | str = 0) -> Any:
        """Run a query and return one value of its first row.

        Args:
            query: SQL query
            column: Column position or name to read

        Returns:
            The value, or None when the query returns no row
        """
        pass

    @abstractmethod
    def try_query(self, query: str) -> bool:
        """Run a query, reporting failure instead of raising.

        Args:
            query: SQL query

        Returns:
            True if the server accepted the query
        """
        pass

    @abstractmethod
    def select_db(self, database: str) -> None:
        """Make ``database`` the default database for following queries."""
        pass

    @abstractmethod
    def is_mariadb(self) -> bool:
        """Check whether the server is a MariaDB build."""
        pass

    @abstractmethod
    def get_version(self) -> int:
        """Return the server version as an integer (5.7.8 is 50708)."""
        pass
