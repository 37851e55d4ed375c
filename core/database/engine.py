"""Database engine factory for the administered server."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from core.config import Settings
from core.database.implementations import MySQLMetadataSource
from core.log import get_logger

logger = get_logger(__name__)


def create_database_engine(settings: Settings, echo: bool = False) -> Engine:
    """Create the SQLAlchemy engine for the configured server.

    Args:
        settings: Application settings holding the database URL and pool options
        echo: Enable SQL echo for debugging

    Returns:
        Configured SQLAlchemy engine
    """
    engine = create_engine(
        settings.database_url,
        echo=echo,
        connect_args={"connect_timeout": settings.db_connect_timeout},
        pool_pre_ping=True,
        pool_recycle=settings.db_pool_recycle,
    )
    logger.info(f"Created database engine for: {engine.url.render_as_string()}")
    return engine


def create_metadata_source(engine: Engine) -> MySQLMetadataSource:
    """Create and connect a metadata source on ``engine``."""
    source = MySQLMetadataSource(engine)
    source.connect()
    return source
