"""API test fixtures — FastAPI app over a per-test SQLite store.

Invariants:
    - get_connection_factory overridden: routes hit the tmp_path store
    - raise_app_exceptions=False so the catch-all handler's 500 is observable

Design Decisions:
    - Lifespan not run by ASGITransport; the store is seeded by fixture instead
"""

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.infrastructure.database import get_connection_factory
from users_api.main import app


@pytest.fixture
async def client(seeded_store):
    """FastAPI test client with the connection factory overridden."""
    app.dependency_overrides[get_connection_factory] = lambda: seeded_store

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
