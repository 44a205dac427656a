"""Service test fixtures — fresh request store + FastAPI test client.

Invariants:
    - Every test gets a fresh InMemoryInferenceRequestStore
    - get_request_store dependency overridden to use that store
    - Overrides cleared after each test

Design Decisions:
    - ASGITransport: exercises routing, dependencies and error handlers without a server
"""

import pytest
from httpx import ASGITransport, AsyncClient

from inference_gateway.config import get_settings
from inference_gateway.main import app
from inference_gateway.services.request_store import (
    InMemoryInferenceRequestStore,
    get_request_store,
)


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def store(settings):
    return InMemoryInferenceRequestStore(settings.max_retry_limit)


@pytest.fixture
async def client(store):
    """FastAPI test client with the request store overridden."""
    app.dependency_overrides[get_request_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
