"""NDB Cluster storage engine."""

from core.engines.base import StorageEngine
from core.engines.models import EngineVariable


class Ndbcluster(StorageEngine):
    def get_variables(self) -> dict[str, EngineVariable]:
        return {"ndb_connectstring": EngineVariable()}

    def get_variables_like_pattern(self) -> str:
        return "ndb\\_%"

    def get_mysql_help_page(self) -> str:
        return "ndbcluster"
