"""Core functionality for the dbadmin system."""

from .config import Settings, load_settings
from .log import (
    get_logger,
    setup_logging,
    setup_production_logging,
    setup_test_logging,
)
from .types import Environment

__all__ = [
    "Environment",
    "Settings",
    "load_settings",
    "get_logger",
    "setup_logging",
    "setup_production_logging",
    "setup_test_logging",
]
