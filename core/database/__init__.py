"""Core database functionality."""

from .engine import create_database_engine, create_metadata_source
from .implementations import MySQLMetadataSource
from .interfaces import DatabaseInterface

__all__ = [
    "DatabaseInterface",
    "MySQLMetadataSource",
    "create_database_engine",
    "create_metadata_source",
]
