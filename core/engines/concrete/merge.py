"""MERGE / MRG_MyISAM storage engines."""

from core.engines.base import StorageEngine


class Merge(StorageEngine):
    pass


class MrgMyisam(StorageEngine):
    def get_mysql_help_page(self) -> str:
        return "merge-storage-engine"
