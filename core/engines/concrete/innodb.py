"""InnoDB storage engine."""

from collections.abc import Callable
from typing import Any

from core.engines.base import StorageEngine
from core.engines.models import EnginePage, EngineVariable
from core.types import SupportLevel, VariableKind
from core.utils import format_byte_down, to_int, to_str

BUFFER_POOL_STATUS_PATTERN = "Innodb\\_buffer\\_pool\\_%"
PAGE_SIZE_STATUS = "Innodb_page_size"
DEFAULT_PAGE_SIZE = 16384


def _ratio(part: int, total: int) -> float:
    return round(part * 100 / total, 2) if total else 0.0


class Innodb(StorageEngine):
    """InnoDB engine with buffer pool and status pages."""

    def get_variables(self) -> dict[str, EngineVariable]:
        return {
            "innodb_data_home_dir": EngineVariable(
                title="Data home directory",
                description=(
                    "The common part of the directory path for all InnoDB data files."
                ),
            ),
            "innodb_data_file_path": EngineVariable(title="Data files"),
            "innodb_autoextend_increment": EngineVariable(
                title="Autoextend increment",
                description=(
                    "The increment size for extending the size of an autoextending "
                    "tablespace when it becomes full."
                ),
                kind=VariableKind.NUMERIC,
            ),
            "innodb_buffer_pool_size": EngineVariable(
                title="Buffer pool size",
                description=(
                    "The size of the memory buffer InnoDB uses to cache data and "
                    "indexes of its tables."
                ),
                kind=VariableKind.SIZE,
            ),
            "innodb_additional_mem_pool_size": EngineVariable(kind=VariableKind.SIZE),
            "innodb_buffer_pool_awe_mem_mb": EngineVariable(kind=VariableKind.SIZE),
            "innodb_checksums": EngineVariable(),
            "innodb_commit_concurrency": EngineVariable(),
            "innodb_concurrency_tickets": EngineVariable(kind=VariableKind.NUMERIC),
            "innodb_doublewrite": EngineVariable(),
            "innodb_fast_shutdown": EngineVariable(),
            "innodb_file_io_threads": EngineVariable(kind=VariableKind.NUMERIC),
            "innodb_file_per_table": EngineVariable(),
            "innodb_flush_log_at_trx_commit": EngineVariable(),
            "innodb_flush_method": EngineVariable(),
            "innodb_force_recovery": EngineVariable(),
            "innodb_lock_wait_timeout": EngineVariable(kind=VariableKind.NUMERIC),
            "innodb_locks_unsafe_for_binlog": EngineVariable(),
            "innodb_log_arch_dir": EngineVariable(),
            "innodb_log_archive": EngineVariable(),
            "innodb_log_buffer_size": EngineVariable(kind=VariableKind.SIZE),
            "innodb_log_file_size": EngineVariable(kind=VariableKind.SIZE),
            "innodb_log_files_in_group": EngineVariable(kind=VariableKind.NUMERIC),
            "innodb_log_group_home_dir": EngineVariable(),
            "innodb_max_dirty_pages_pct": EngineVariable(kind=VariableKind.NUMERIC),
            "innodb_max_purge_lag": EngineVariable(),
            "innodb_mirrored_log_groups": EngineVariable(kind=VariableKind.NUMERIC),
            "innodb_open_files": EngineVariable(kind=VariableKind.NUMERIC),
            "innodb_support_xa": EngineVariable(),
            "innodb_sync_spin_loops": EngineVariable(kind=VariableKind.NUMERIC),
            "innodb_table_locks": EngineVariable(kind=VariableKind.BOOLEAN),
            "innodb_thread_concurrency": EngineVariable(kind=VariableKind.NUMERIC),
            "innodb_thread_sleep_delay": EngineVariable(kind=VariableKind.NUMERIC),
        }

    def get_variables_like_pattern(self) -> str:
        return "innodb\\_%"

    def get_info_pages(self) -> dict[str, str]:
        if self.support < SupportLevel.SUPPORTED:
            return {}
        return {"Bufferpool": "Buffer Pool", "Status": "InnoDB Status"}

    def _page_builders(self) -> dict[str, Callable[[], EnginePage]]:
        return {
            "Bufferpool": self.get_buffer_pool_page,
            "Status": self.get_status_page,
        }

    def get_buffer_pool_page(self) -> EnginePage:
        """Buffer pool usage and activity from ``SHOW STATUS``."""
        status: dict[str, Any] = {
            row["name"]: row["value"]
            for row in self.source.get_status_variables(BUFFER_POOL_STATUS_PATTERN)
        }
        for row in self.source.get_status_variables(PAGE_SIZE_STATUS):
            status[row["name"]] = row["value"]

        def counter(name: str) -> int:
            return to_int(status.get(f"Innodb_buffer_pool_{name}"), 0) or 0

        page_size = to_int(status.get(PAGE_SIZE_STATUS), DEFAULT_PAGE_SIZE) or 0
        total_pages = counter("pages_total")
        total_size = format_byte_down(total_pages * page_size)

        usage: dict[str, Any] = {
            "pages_total": total_pages,
            "total_size": " ".join(total_size) if total_size else "",
            "pages_free": counter("pages_free"),
            "pages_dirty": counter("pages_dirty"),
            "pages_data": counter("pages_data"),
            "pages_flushed": counter("pages_flushed"),
            "pages_misc": counter("pages_misc"),
        }
        if "Innodb_buffer_pool_pages_latched" in status:
            usage["pages_latched"] = counter("pages_latched")

        read_requests = counter("read_requests")
        write_requests = counter("write_requests")
        usage.update(
            {
                "read_requests": read_requests,
                "write_requests": write_requests,
                "read_misses": counter("reads"),
                "write_waits": counter("wait_free"),
                "read_misses_pct": _ratio(counter("reads"), read_requests),
                "write_waits_pct": _ratio(counter("wait_free"), write_requests),
            }
        )
        return EnginePage(page_id="Bufferpool", title="Buffer Pool", values=usage)

    def get_status_page(self) -> EnginePage:
        """Raw ``SHOW ENGINE INNODB STATUS`` output."""
        text = self.source.fetch_value("SHOW ENGINE INNODB STATUS;", "Status")
        return EnginePage(page_id="Status", title="InnoDB Status", text=to_str(text, ""))

    def get_mysql_help_page(self) -> str:
        return "innodb-storage-engine"

    def get_plugin_version(self) -> str:
        """Version of the InnoDB plugin."""
        return to_str(self.source.fetch_value("SELECT @@innodb_version;"), "") or ""

    def supports_file_per_table(self) -> bool:
        value = self.source.fetch_value(
            "SHOW GLOBAL VARIABLES LIKE 'innodb_file_per_table';", 1
        )
        return to_str(value, "") == "ON"

    def get_file_format(self) -> str | None:
        """Value of ``innodb_file_format``, None on servers without it."""
        value = self.source.fetch_value(
            "SHOW GLOBAL VARIABLES LIKE 'innodb_file_format';", 1
        )
        return to_str(value)


class Innobase(Innodb):
    """Old name of the InnoDB engine."""

    pass
