"""Fixtures for API tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_request_context
from core.config import Environment, Settings
from core.context import RequestContext


@pytest.fixture
def settings() -> Settings:
    return Settings(environment=Environment.TESTING, api_version="1.0.0")


@pytest.fixture
def api_source(make_source, users_index_rows, engine_source):
    """Source serving both index and engine metadata."""
    source = make_source(
        indexes={("shop", "users"): users_index_rows, ("shop", "log"): []},
        engines=engine_source.engines,
        values=engine_source.values,
    )
    return source


@pytest.fixture
def app(settings: Settings, api_source) -> FastAPI:
    app = create_app(settings)
    app.dependency_overrides[get_request_context] = lambda: RequestContext(
        api_source, settings.legacy_fulltext_filter
    )
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    return TestClient(app)
