"""FastAPI dependencies for metadata access."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from core.config import Settings
from core.context import RequestContext
from core.database import MySQLMetadataSource
from core.database.interfaces import DatabaseInterface
from core.log import get_logger

logger = get_logger(__name__)


def get_settings(request: Request) -> Settings:
    """Get settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


# Database engine dependency
def get_engine(request: Request) -> Engine:
    """Get database engine from app state."""
    engine: Engine = request.app.state.engine
    return engine


# Metadata source dependency
def get_metadata_source(
    engine: Annotated[Engine, Depends(get_engine)],
) -> Generator[DatabaseInterface, None, None]:
    """Open a metadata source for the duration of the request."""
    with MySQLMetadataSource(engine) as source:
        yield source


def get_request_context(
    source: Annotated[DatabaseInterface, Depends(get_metadata_source)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RequestContext:
    """Fresh caches and registries for the request."""
    return RequestContext(source, settings.legacy_fulltext_filter)
