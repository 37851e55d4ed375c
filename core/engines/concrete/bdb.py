"""BerkeleyDB storage engine."""

from core.engines.base import StorageEngine
from core.engines.models import EngineVariable
from core.types import VariableKind


class Bdb(StorageEngine):
    """BerkeleyDB (BDB) engine, removed in MySQL 5.1."""

    def get_variables(self) -> dict[str, EngineVariable]:
        return {
            "version_bdb": EngineVariable(title="Version information"),
            "bdb_cache_size": EngineVariable(kind=VariableKind.SIZE),
            "bdb_home": EngineVariable(),
            "bdb_log_buffer_size": EngineVariable(kind=VariableKind.SIZE),
            "bdb_logdir": EngineVariable(),
            "bdb_max_lock": EngineVariable(kind=VariableKind.NUMERIC),
            "bdb_shared_data": EngineVariable(),
            "bdb_tmpdir": EngineVariable(),
            "bdb_data_direct": EngineVariable(),
            "bdb_lock_detect": EngineVariable(),
            "bdb_log_direct": EngineVariable(),
            "bdb_no_recover": EngineVariable(),
            "bdb_no_sync": EngineVariable(),
            "skip_sync_bdb_logs": EngineVariable(),
            "sync_bdb_logs": EngineVariable(),
        }

    def get_variables_like_pattern(self) -> str:
        return "%bdb%"

    def get_mysql_help_page(self) -> str:
        return "bdb"


class Berkeleydb(Bdb):
    """Alias of the BDB engine."""

    pass
