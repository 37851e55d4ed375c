"""PERFORMANCE_SCHEMA storage engine."""

from core.engines.base import StorageEngine


class PerformanceSchema(StorageEngine):
    def get_mysql_help_page(self) -> str:
        return "performance-schema"
