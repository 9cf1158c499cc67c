"""Connection Factory — one async database connection per logical operation.

Invariants:
    - Database URL fixed at construction, read-only afterwards
    - create_connection() returns a fresh handle per call; the caller releases it
    - Open failures raise StoreConnectionError, chained from the driver error
    - Never retries: retry policy belongs to the caller

Design Decisions:
    - Factory stored on app.state by the lifespan, handed to the FastAPI
      dependency below (no module-level singleton)
    - SQLite creates the database file on first connect
"""

import logging

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncConnection, create_async_engine

from users_api.core.errors import StoreConnectionError

logger = logging.getLogger(__name__)


class DatabaseConnectionFactory:
    """Hands out async connections against a single configured database."""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = create_async_engine(database_url, pool_pre_ping=True)

    async def create_connection(self) -> AsyncConnection:
        """Open a connection. Caller must `await conn.close()`."""
        try:
            return await self.engine.connect()
        except (DBAPIError, OSError) as e:
            raise StoreConnectionError(
                self.engine.url.render_as_string(hide_password=True),
            ) from e

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            conn = await self.create_connection()
            try:
                await conn.execute(text("SELECT 1"))
            finally:
                await conn.close()
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_connection_factory(request: Request) -> DatabaseConnectionFactory:
    """FastAPI dependency for the connection factory built at startup."""
    factory = getattr(request.app.state, "connection_factory", None)
    if factory is None:
        raise RuntimeError("Database not initialized")
    return factory
