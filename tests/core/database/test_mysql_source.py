"""Tests for the SQLAlchemy-backed metadata source."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from core.config import Settings
from core.database import create_database_engine, create_metadata_source
from core.database.implementations.mysql import (
    MySQLMetadataSource,
    parse_server_version,
    quote_identifier,
)
from core.exceptions import DatabaseNotConnectedError


class FakeRow(tuple):
    """Result row supporting positional and ``_mapping`` access."""

    def __new__(cls, mapping: dict):
        row = super().__new__(cls, mapping.values())
        row._mapping = mapping
        return row


@pytest.fixture
def engine() -> MagicMock:
    return MagicMock()


@pytest.fixture
def connection(engine: MagicMock) -> MagicMock:
    return engine.connect.return_value.execution_options.return_value


@pytest.fixture
def source(engine: MagicMock) -> MySQLMetadataSource:
    source = MySQLMetadataSource(engine)
    source.connect()
    return source


def executed_sql(connection: MagicMock) -> list[str]:
    return [str(call.args[0]) for call in connection.execute.call_args_list]


def test_quote_identifier() -> None:
    """Test identifiers are backtick quoted with escaping."""
    assert quote_identifier("users") == "`users`"
    assert quote_identifier("we`ird") == "`we``ird`"
    assert quote_identifier("orders :archive") == "`orders \\:archive`"


@pytest.mark.parametrize(
    "version,expected",
    [
        ("8.0.33", 80033),
        ("5.7.8-log", 50708),
        ("10.6.12-MariaDB-1:10.6.12+maria~ubu2004", 100612),
        ("garbage", 0),
    ],
)
def test_parse_server_version(version, expected) -> None:
    """Test version strings become comparable integers."""
    assert parse_server_version(version) == expected


def test_requires_connection(engine: MagicMock) -> None:
    """Test queries fail before connect()."""
    source = MySQLMetadataSource(engine)
    assert source.is_connected is False
    with pytest.raises(DatabaseNotConnectedError):
        source.get_table_indexes("shop", "users")


def test_connect_uses_autocommit(engine: MagicMock, source: MySQLMetadataSource) -> None:
    """Test the connection runs in autocommit mode."""
    engine.connect.return_value.execution_options.assert_called_once_with(
        isolation_level="AUTOCOMMIT"
    )
    assert source.is_connected is True


def test_context_manager(engine: MagicMock, connection: MagicMock) -> None:
    """Test the context manager closes the connection."""
    with MySQLMetadataSource(engine) as source:
        assert source.is_connected
    connection.close.assert_called_once()
    assert source.is_connected is False


def test_get_table_indexes(source: MySQLMetadataSource, connection: MagicMock) -> None:
    """Test SHOW INDEXES is issued with quoted names."""
    connection.execute.return_value.mappings.return_value = [
        {"Key_name": "PRIMARY", "Column_name": "id"}
    ]
    rows = source.get_table_indexes("shop", "users")

    assert rows == [{"Key_name": "PRIMARY", "Column_name": "id"}]
    assert executed_sql(connection) == ["SHOW INDEXES FROM `users` FROM `shop`"]


def test_table_name_with_colon(source: MySQLMetadataSource, connection: MagicMock) -> None:
    """Test a colon in a table name is not read as a bind parameter."""
    connection.execute.return_value.mappings.return_value = []
    assert source.get_table_indexes("shop", "orders :archive") == []

    statement = connection.execute.call_args.args[0]
    assert statement.compile().params == {}
    assert executed_sql(connection) == ["SHOW INDEXES FROM `orders :archive` FROM `shop`"]


def test_list_storage_engines(source: MySQLMetadataSource, connection: MagicMock) -> None:
    """Test engines are keyed by name."""
    connection.execute.return_value.mappings.return_value = [
        {"Engine": "InnoDB", "Support": "DEFAULT"},
        {"Engine": "MyISAM", "Support": "YES"},
    ]
    engines = source.list_storage_engines()

    assert list(engines) == ["InnoDB", "MyISAM"]
    assert engines["InnoDB"]["Support"] == "DEFAULT"


def test_variables_with_pattern(source: MySQLMetadataSource, connection: MagicMock) -> None:
    """Test LIKE patterns are bound as parameters."""
    connection.execute.return_value.mappings.return_value = [
        {"Variable_name": "innodb_version", "Value": "8.0.33"}
    ]
    variables = source.get_global_variables("innodb\\_%")

    assert variables == [{"name": "innodb_version", "value": "8.0.33"}]
    call = connection.execute.call_args
    assert str(call.args[0]) == "SHOW GLOBAL VARIABLES LIKE :pattern"
    assert call.args[1] == {"pattern": "innodb\\_%"}


def test_status_without_pattern(source: MySQLMetadataSource, connection: MagicMock) -> None:
    """Test status variables without a pattern."""
    connection.execute.return_value.mappings.return_value = []
    assert source.get_status_variables() == []
    assert executed_sql(connection) == ["SHOW GLOBAL STATUS"]


def test_fetch_value(source: MySQLMetadataSource, connection: MagicMock) -> None:
    """Test single values by position and by column name."""
    connection.execute.return_value.first.return_value = FakeRow(
        {"Type": "InnoDB", "Name": "", "Status": "monitor output"}
    )

    assert source.fetch_value("SHOW ENGINE INNODB STATUS") == "InnoDB"
    assert source.fetch_value("SHOW ENGINE INNODB STATUS", 2) == "monitor output"
    assert source.fetch_value("SHOW ENGINE INNODB STATUS", "Status") == "monitor output"
    assert source.fetch_value("SHOW ENGINE INNODB STATUS", 5) is None

    connection.execute.return_value.first.return_value = None
    assert source.fetch_value("SELECT 1 FROM dual WHERE 0") is None


def test_query_errors_propagate(source: MySQLMetadataSource, connection: MagicMock) -> None:
    """Test driver errors are not wrapped."""
    connection.execute.side_effect = SQLAlchemyError("server has gone away")
    with pytest.raises(SQLAlchemyError):
        source.list_storage_engines()


def test_try_query(source: MySQLMetadataSource, connection: MagicMock) -> None:
    """Test rejected queries report False."""
    assert source.try_query("SELECT 1") is True

    connection.execute.side_effect = SQLAlchemyError("unknown function")
    assert source.try_query("SELECT mroonga_command('object_list')") is False


def test_select_db(source: MySQLMetadataSource, connection: MagicMock) -> None:
    """Test USE is issued with a quoted name."""
    source.select_db("blog")
    assert executed_sql(connection) == ["USE `blog`"]

    source.select_db("db:x")
    assert connection.execute.call_args.args[0].compile().params == {}
    assert executed_sql(connection)[-1] == "USE `db:x`"


@pytest.mark.parametrize(
    "version,mariadb,number",
    [
        ("8.0.33", False, 80033),
        ("10.11.2-MariaDB", True, 101102),
    ],
)
def test_server_version(
    source: MySQLMetadataSource, connection: MagicMock, version, mariadb, number
) -> None:
    """Test the version is read once and interpreted."""
    connection.execute.return_value.first.return_value = FakeRow({"VERSION()": version})

    assert source.is_mariadb() is mariadb
    assert source.get_version() == number
    assert connection.execute.call_count == 1


def test_create_database_engine() -> None:
    """Test the engine factory applies pool settings."""
    settings = Settings(database_url="mysql+pymysql://user@db:3306/", db_pool_recycle=60)
    engine = create_database_engine(settings)

    assert engine.url.drivername == "mysql+pymysql"
    assert engine.url.host == "db"
    assert engine.pool._recycle == 60
    engine.dispose()


def test_create_metadata_source(engine: MagicMock) -> None:
    """Test the factory returns a connected source."""
    source = create_metadata_source(engine)
    assert source.is_connected
