"""Database implementations package."""

from .mysql import MySQLMetadataSource

__all__ = [
    "MySQLMetadataSource",
]
