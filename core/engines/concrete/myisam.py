"""MyISAM storage engine."""

from core.engines.base import StorageEngine
from core.engines.models import EngineVariable
from core.types import VariableKind


class Myisam(StorageEngine):
    def get_variables(self) -> dict[str, EngineVariable]:
        return {
            "myisam_data_pointer_size": EngineVariable(
                title="Data pointer size",
                description=(
                    "The default pointer size in bytes, to be used by CREATE TABLE "
                    "for MyISAM tables when no MAX_ROWS option is specified."
                ),
                kind=VariableKind.SIZE,
            ),
            "myisam_recover_options": EngineVariable(
                title="Automatic recovery mode",
                description=(
                    "The mode for automatic recovery of crashed MyISAM tables, as "
                    "set via the --myisam-recover server startup option."
                ),
            ),
            "myisam_max_sort_file_size": EngineVariable(
                title="Maximum size for temporary sort files",
                description=(
                    "The maximum size of the temporary file MySQL is allowed to use "
                    "while re-creating a MyISAM index (during REPAIR TABLE, ALTER "
                    "TABLE, or LOAD DATA INFILE). If the file-size would be bigger "
                    "than this, the index will be created through the key cache "
                    "(which is slower)."
                ),
                kind=VariableKind.SIZE,
            ),
            "myisam_max_extra_sort_file_size": EngineVariable(
                title="Maximum size for temporary files on index creation",
                description=(
                    "If the temporary file used for fast MyISAM index creation "
                    "would be bigger than using the key cache by the amount "
                    "specified here, then prefer the key cache method."
                ),
                kind=VariableKind.SIZE,
            ),
            "myisam_repair_threads": EngineVariable(
                title="Repair threads",
                description=(
                    "If this value is greater than 1, MyISAM table indexes are "
                    "created in parallel (each index in its own thread) during the "
                    "repair by sorting process."
                ),
                kind=VariableKind.NUMERIC,
            ),
            "myisam_sort_buffer_size": EngineVariable(
                title="Sort buffer size",
                description=(
                    "The buffer that is allocated when sorting MyISAM indexes "
                    "during a REPAIR TABLE or when creating indexes with CREATE "
                    "INDEX or ALTER TABLE."
                ),
                kind=VariableKind.SIZE,
            ),
            "myisam_stats_method": EngineVariable(),
            "delay_key_write": EngineVariable(),
            "bulk_insert_buffer_size": EngineVariable(kind=VariableKind.SIZE),
            "skip_external_locking": EngineVariable(kind=VariableKind.BOOLEAN),
        }

    def get_variables_like_pattern(self) -> str:
        return "myisam\\_%"
