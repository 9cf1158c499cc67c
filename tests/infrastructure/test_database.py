"""DatabaseConnectionFactory — per-call handles, failure mapping, health.

Invariants:
    - Each create_connection() call returns a distinct handle
    - An unopenable store raises StoreConnectionError chained from the driver error
    - health_check() reports False instead of raising
    - SQLite creates the database file on first connect
"""

import asyncio

import pytest
from sqlalchemy import text

from users_api.core.errors import StoreConnectionError
from users_api.infrastructure.database import DatabaseConnectionFactory


@pytest.fixture
async def unreachable_factory(tmp_path):
    factory = DatabaseConnectionFactory(
        f"sqlite+aiosqlite:///{tmp_path / 'missing-dir' / 'users.db'}",
    )
    yield factory
    await factory.dispose()


async def test_create_connection_returns_usable_handle(connection_factory):
    conn = await connection_factory.create_connection()
    try:
        assert (await conn.execute(text("SELECT 1"))).scalar_one() == 1
    finally:
        await conn.close()


async def test_concurrent_calls_get_distinct_handles(connection_factory):
    first, second = await asyncio.gather(
        connection_factory.create_connection(),
        connection_factory.create_connection(),
    )
    try:
        assert first is not second
    finally:
        await first.close()
        await second.close()


async def test_first_connection_creates_database_file(tmp_path):
    path = tmp_path / "fresh.db"
    factory = DatabaseConnectionFactory(f"sqlite+aiosqlite:///{path}")
    conn = await factory.create_connection()
    await conn.close()
    await factory.dispose()

    assert path.exists()


async def test_unopenable_store_raises_store_connection_error(unreachable_factory):
    with pytest.raises(StoreConnectionError) as exc_info:
        await unreachable_factory.create_connection()

    assert exc_info.value.http_status == 503
    assert exc_info.value.__cause__ is not None


async def test_health_check_true_when_store_reachable(connection_factory):
    assert await connection_factory.health_check() is True


async def test_health_check_false_when_store_unreachable(unreachable_factory):
    assert await unreachable_factory.health_check() is False
