"""Storage engine models for API responses."""

from pydantic import BaseModel

from core.engines import EngineSummary


class EngineListResponse(BaseModel):
    """Response model for the engine picker list."""

    engines: list[EngineSummary]
    count: int
