"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test that touches the store gets a fresh SQLite file under tmp_path
    - Settings never point at a developer's real database

Design Decisions:
    - File database over :memory:: each repository call opens its own
      connection, and all of them must see the same data
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test-users.db")

import pytest  # noqa: E402
from sqlalchemy.schema import CreateTable  # noqa: E402

from users_api.infrastructure.database import DatabaseConnectionFactory  # noqa: E402
from users_api.infrastructure.database_initializer import DatabaseInitializer  # noqa: E402
from users_api.models.user import UserRecord  # noqa: E402


@pytest.fixture
async def connection_factory(tmp_path):
    factory = DatabaseConnectionFactory(
        f"sqlite+aiosqlite:///{tmp_path / 'users.db'}",
    )
    yield factory
    await factory.dispose()


@pytest.fixture
async def empty_store(connection_factory):
    """Factory over a store with the users table created and no rows."""
    conn = await connection_factory.create_connection()
    try:
        await conn.execute(CreateTable(UserRecord.__table__, if_not_exists=True))
        await conn.commit()
    finally:
        await conn.close()
    return connection_factory


@pytest.fixture
async def seeded_store(connection_factory):
    """Factory over a store initialized the way the app does at startup."""
    await DatabaseInitializer(connection_factory).initialize()
    return connection_factory
