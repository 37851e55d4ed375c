"""Logging configuration for the dbadmin system."""

import logging
import logging.handlers
import sys
from pathlib import Path

import colorlog

# Plain format shared by the file handler and uncolored console output
BASE_LOG_FORMAT = (
    "%(asctime)s %(levelname)8s %(message)s (%(name)s@%(filename)s:%(lineno)d)"
)
COLOR_LOG_FORMAT = (
    "%(asctime)s %(log_color)s%(levelname)8s%(reset)s %(message)s "
    "\033[90m(%(name)s@%(filename)s:%(lineno)d)\033[0m"
)
DATE_FORMAT = "%m-%d %H:%M:%S"

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Drivers that flood DEBUG output with per-statement chatter
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "pymysql")


def resolve_level(level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value.

    Unknown names fall back to INFO instead of failing the startup.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: int | str = logging.INFO,
    use_colors: bool = True,
    enable_file_logging: bool = False,
    log_dir: Path | None = None,
    is_test_env: bool = False,
) -> None:
    """Configure the root logger.

    Args:
        level: Logging level, numeric or by name
        use_colors: Whether the console handler colors level names
        enable_file_logging: Whether to also write to a log file
        log_dir: Directory for log files (defaults to ./logs or ./logs/test)
        is_test_env: Whether this is a test run (file is overwritten per run)
    """
    handlers = [_create_console_handler(use_colors)]

    if enable_file_logging:
        if log_dir is None:
            log_dir = Path("logs", "test") if is_test_env else Path("logs")
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_create_file_handler(log_dir, is_test_env))

    logging.basicConfig(level=resolve_level(level), handlers=handlers, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _create_console_handler(use_colors: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if use_colors:
        formatter: logging.Formatter = colorlog.ColoredFormatter(
            COLOR_LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors=LEVEL_COLORS,
            style="%",
        )
    else:
        formatter = logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT)
    handler.setFormatter(formatter)
    return handler


def _create_file_handler(log_dir: Path, is_test_env: bool) -> logging.Handler:
    handler: logging.Handler
    if is_test_env:
        handler = logging.FileHandler(log_dir / "test.log", mode="w")
    else:
        handler = logging.handlers.RotatingFileHandler(
            log_dir / "dbadmin.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=4,
            encoding="utf-8",
        )
    handler.setFormatter(logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically called with ``__name__``)."""
    return logging.getLogger(name)


def setup_production_logging(level: int | str = logging.INFO) -> None:
    """Log to console and a rotating file under ./logs."""
    setup_logging(level=level, enable_file_logging=True)


def setup_test_logging(level: int | str = logging.DEBUG) -> None:
    """Log to console and ./logs/test/test.log, overwritten per run."""
    setup_logging(level=level, enable_file_logging=True, is_test_env=True)
