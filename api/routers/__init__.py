"""API routers package."""

from .common import router as common_router
from .engines import router as engines_router
from .indexes import router as indexes_router

__all__ = [
    "common_router",
    "engines_router",
    "indexes_router",
]
