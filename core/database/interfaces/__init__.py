"""Database interfaces module."""

from .metadata_source import DatabaseInterface

__all__ = [
    "DatabaseInterface",
]
