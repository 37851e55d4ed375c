"""MySQL/MariaDB metadata source package."""

from .mysql_source import MySQLMetadataSource, parse_server_version, quote_identifier

__all__ = [
    "MySQLMetadataSource",
    "parse_server_version",
    "quote_identifier",
]
