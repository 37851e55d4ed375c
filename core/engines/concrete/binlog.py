"""Binary log pseudo engine."""

from core.engines.base import StorageEngine


class Binlog(StorageEngine):
    def get_mysql_help_page(self) -> str:
        return "binary-log"
