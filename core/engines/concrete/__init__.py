"""Storage engines with engine specific behavior."""

from .bdb import Bdb, Berkeleydb
from .binlog import Binlog
from .innodb import Innobase, Innodb
from .memory import Memory
from .merge import Merge, MrgMyisam
from .mroonga import Mroonga
from .myisam import Myisam
from .ndbcluster import Ndbcluster
from .pbxt import Pbxt
from .performance_schema import PerformanceSchema

__all__ = [
    "Bdb",
    "Berkeleydb",
    "Binlog",
    "Innobase",
    "Innodb",
    "Memory",
    "Merge",
    "MrgMyisam",
    "Mroonga",
    "Myisam",
    "Ndbcluster",
    "Pbxt",
    "PerformanceSchema",
]
