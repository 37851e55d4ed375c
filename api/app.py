"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from api.routers import common_router, engines_router, indexes_router
from core import get_logger, setup_logging
from core.config import Settings, load_settings
from core.database import create_database_engine
from core.exceptions import DatabaseNotConnectedError

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    setup_logging(
        level=settings.log_level,
        enable_file_logging=settings.log_to_file,
    )
    logger.info(f"Starting dbadmin API server in {settings.environment} mode")

    engine = create_database_engine(settings)
    app.state.engine = engine

    logger.info("dbadmin API server initialized successfully")

    yield

    engine.dispose()
    logger.info("dbadmin API server shutting down")


async def database_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report failures of the administered server as a bad gateway."""
    logger.error(f"Database error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": f"Database server error: {exc}"},
    )


async def not_connected_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report a metadata source that was used without a connection."""
    logger.error(f"No database connection on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI app with current settings."""
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title=settings.api_title,
        description="Metadata API for MySQL and MariaDB indexes and storage engines",
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(DatabaseNotConnectedError, not_connected_handler)

    app.include_router(common_router)
    app.include_router(indexes_router)
    app.include_router(engines_router)
    return app


app = create_app()
