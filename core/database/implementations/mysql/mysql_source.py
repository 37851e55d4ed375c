"""MySQL/MariaDB metadata source backed by a SQLAlchemy engine."""

import re
from types import TracebackType
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from core.database.interfaces import DatabaseInterface
from core.exceptions import DatabaseNotConnectedError
from core.log import get_logger
from core.types import MetadataRowType
from core.utils import escape_bind_markers

logger = get_logger(__name__)

VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)")


def quote_identifier(name: str) -> str:
    """Quote a schema object name with backticks for use inside ``text()``."""
    return escape_bind_markers("`" + name.replace("`", "``") + "`")


def parse_server_version(version: str) -> int:
    """Turn ``8.0.33`` or ``10.6.12-MariaDB-log`` into 80033 / 100612.

    Unparseable strings give 0.
    """
    match = VERSION_PATTERN.match(version or "")
    if not match:
        return 0
    major, minor, patch = (int(part) for part in match.groups())
    return major * 10000 + minor * 100 + patch


class MySQLMetadataSource(DatabaseInterface):
    """Metadata source issuing ``SHOW`` statements over one connection.

    A single connection is kept open between ``connect()`` and
    ``disconnect()`` so that ``select_db()`` applies to later queries.
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize the source.

        Args:
            engine: SQLAlchemy engine pointing at the administered server
        """
        self.engine = engine
        self._connection: Connection | None = None
        self._version_string: str | None = None

    def connect(self) -> None:
        """Open the connection used for every metadata query."""
        if self._connection is not None:
            return
        try:
            self._connection = self.engine.connect().execution_options(
                isolation_level="AUTOCOMMIT"
            )
            logger.info(f"Connected to {self.engine.url.render_as_string()}")
        except SQLAlchemyError as e:
            logger.error(f"Failed to connect to database server: {e}")
            raise

    def disconnect(self) -> None:
        """Close the connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.info("Disconnected from database server")

    @property
    def is_connected(self) -> bool:
        """Check if connection is active."""
        return self._connection is not None

    def _require_connection(self) -> Connection:
        if self._connection is None:
            raise DatabaseNotConnectedError("Metadata source is not connected")
        return self._connection

    def _fetch_rows(
        self, query: str, params: dict[str, Any] | None = None
    ) -> list[MetadataRowType]:
        connection = self._require_connection()
        try:
            result = connection.execute(text(query), params or {})
            return [dict(row) for row in result.mappings()]
        except SQLAlchemyError as e:
            logger.error(f"Metadata query failed ({query}): {e}")
            raise

    def _fetch_name_values(
        self, statement: str, like: str | None
    ) -> list[dict[str, Any]]:
        if like:
            rows = self._fetch_rows(f"{statement} LIKE :pattern", {"pattern": like})
        else:
            rows = self._fetch_rows(statement)
        return [
            {"name": row.get("Variable_name"), "value": row.get("Value")}
            for row in rows
        ]

    def get_table_indexes(self, schema: str, table: str) -> list[MetadataRowType]:
        """Fetch ``SHOW INDEXES`` rows for a table."""
        query = (
            f"SHOW INDEXES FROM {quote_identifier(table)} "
            f"FROM {quote_identifier(schema)}"
        )
        return self._fetch_rows(query)

    def list_storage_engines(self) -> dict[str, MetadataRowType]:
        """Fetch ``SHOW STORAGE ENGINES`` keyed by engine name."""
        rows = self._fetch_rows("SHOW STORAGE ENGINES")
        return {str(row["Engine"]): row for row in rows if row.get("Engine")}

    def get_global_variables(self, like: str | None = None) -> list[dict[str, Any]]:
        """Fetch ``SHOW GLOBAL VARIABLES``."""
        return self._fetch_name_values("SHOW GLOBAL VARIABLES", like)

    def get_status_variables(self, like: str | None = None) -> list[dict[str, Any]]:
        """Fetch ``SHOW GLOBAL STATUS``."""
        return self._fetch_name_values("SHOW GLOBAL STATUS", like)

    def fetch_value(self, query: str, column: int | str = 0) -> Any:
        """Return one value of the first row, or None without rows."""
        connection = self._require_connection()
        try:
            row = connection.execute(text(query)).first()
        except SQLAlchemyError as e:
            logger.error(f"Metadata query failed ({query}): {e}")
            raise

        if row is None:
            return None
        if isinstance(column, str):
            return row._mapping.get(column)
        return row[column] if column < len(row) else None

    def try_query(self, query: str) -> bool:
        """Run a query and report whether the server accepted it."""
        connection = self._require_connection()
        try:
            connection.execute(text(query))
        except SQLAlchemyError as e:
            logger.debug(f"Query rejected by server ({query}): {e}")
            return False
        return True

    def select_db(self, database: str) -> None:
        """Issue ``USE`` for the given database."""
        connection = self._require_connection()
        connection.execute(text(f"USE {quote_identifier(database)}"))

    def _server_version_string(self) -> str:
        if self._version_string is None:
            self._version_string = str(self.fetch_value("SELECT VERSION()") or "")
        return self._version_string

    def is_mariadb(self) -> bool:
        """Check the version string for a MariaDB build."""
        return "mariadb" in self._server_version_string().lower()

    def get_version(self) -> int:
        """Return the numeric server version."""
        return parse_server_version(self._server_version_string())

    def __enter__(self) -> "MySQLMetadataSource":
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Context manager exit."""
        self.disconnect()
