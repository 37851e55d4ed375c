"""PBXT storage engine."""

import re
from collections.abc import Callable
from typing import Any

from core.engines.base import StorageEngine
from core.engines.models import EnginePage, EngineVariable
from core.types import VariableKind
from core.utils import extract_value_from_formatted_size, format_byte_down

FORMATTED_SIZE = re.compile(r"^[0-9]+[a-zA-Z]+$")
DOCUMENTATION_URL = "https://mariadb.com/kb/en/about-pbxt/"


class Pbxt(StorageEngine):
    """PBXT engine; its size variables are reported as ``8MB`` style text."""

    def get_variables(self) -> dict[str, EngineVariable]:
        return {
            "pbxt_index_cache_size": EngineVariable(
                title="Index cache size",
                description=(
                    "This is the amount of memory allocated to the index cache. "
                    "Default value is 32MB. The memory allocated here is used only "
                    "for caching index pages."
                ),
                kind=VariableKind.SIZE,
            ),
            "pbxt_record_cache_size": EngineVariable(
                title="Record cache size",
                description=(
                    "This is the amount of memory allocated to the record cache used "
                    "to cache table data. The default value is 32MB. This memory is "
                    "used to cache changes to the handle data (.xtd) and row pointer "
                    "(.xtr) files."
                ),
                kind=VariableKind.SIZE,
            ),
            "pbxt_log_cache_size": EngineVariable(
                title="Log cache size",
                description=(
                    "The amount of memory allocated to the transaction log cache used "
                    "to cache on transaction log data. The default is 16MB."
                ),
                kind=VariableKind.SIZE,
            ),
            "pbxt_log_file_threshold": EngineVariable(
                title="Log file threshold",
                description=(
                    "The size of a transaction log before rollover, and a new log is "
                    "created. The default value is 16MB."
                ),
                kind=VariableKind.SIZE,
            ),
            "pbxt_transaction_buffer_size": EngineVariable(
                title="Transaction buffer size",
                description=(
                    "The size of the global transaction log buffer (the engine "
                    "allocates 2 buffers of this size). The default is 1MB."
                ),
                kind=VariableKind.SIZE,
            ),
            "pbxt_checkpoint_frequency": EngineVariable(
                title="Checkpoint frequency",
                description=(
                    "The amount of data written to the transaction log before a "
                    "checkpoint is performed. The default value is 24MB."
                ),
                kind=VariableKind.SIZE,
            ),
            "pbxt_data_log_threshold": EngineVariable(
                title="Data log threshold",
                description=(
                    "The maximum size of a data log file. The default value is 64MB. "
                    "PBXT can create a maximum of 32000 data logs, which are used by "
                    "all tables. So the value of this variable can be increased to "
                    "increase the total amount of data that can be stored in the "
                    "database."
                ),
                kind=VariableKind.SIZE,
            ),
            "pbxt_garbage_threshold": EngineVariable(
                title="Garbage threshold",
                description=(
                    "The percentage of garbage in a data log file before it is "
                    "compacted. This is a value between 1 and 99. The default is 50."
                ),
                kind=VariableKind.NUMERIC,
            ),
            "pbxt_log_buffer_size": EngineVariable(
                title="Log buffer size",
                description=(
                    "The size of the buffer used when writing a data log. The default "
                    "is 256MB. The engine allocates one buffer per thread, but only "
                    "if the thread is required to write a data log."
                ),
                kind=VariableKind.SIZE,
            ),
            "pbxt_data_file_grow_size": EngineVariable(
                title="Data file grow size",
                description="The grow size of the handle data (.xtd) files.",
                kind=VariableKind.SIZE,
            ),
            "pbxt_row_file_grow_size": EngineVariable(
                title="Row file grow size",
                description="The grow size of the row pointer (.xtr) files.",
                kind=VariableKind.SIZE,
            ),
            "pbxt_log_file_count": EngineVariable(
                title="Log file count",
                description=(
                    "This is the number of transaction log files "
                    "(pbxt/system/xlog*.xt) the system will maintain. If the number "
                    "of logs exceeds this value then old logs will be deleted, "
                    "otherwise they are renamed and given the next highest number."
                ),
                kind=VariableKind.NUMERIC,
            ),
        }

    def get_variables_like_pattern(self) -> str:
        return "pbxt\\_%"

    def resolve_type_size(self, value: Any) -> tuple[str, str] | None:
        """Accept ``8MB``/``1GB``/``64K`` notation besides plain byte counts."""
        if isinstance(value, str) and FORMATTED_SIZE.match(value):
            value = extract_value_from_formatted_size(value)
        return format_byte_down(value)

    def get_info_pages(self) -> dict[str, str]:
        return {"Documentation": "Documentation"}

    def _page_builders(self) -> dict[str, Callable[[], EnginePage]]:
        return {"Documentation": self.get_documentation_page}

    def get_documentation_page(self) -> EnginePage:
        return EnginePage(
            page_id="Documentation",
            title="Documentation",
            text=(
                "Documentation and further information about PBXT can be found "
                f"at {DOCUMENTATION_URL}"
            ),
            values={"url": DOCUMENTATION_URL},
        )
