"""Database Initializer — idempotent schema bootstrap and seed row.

Invariants:
    - Runs once, before the app accepts traffic (FastAPI lifespan)
    - CREATE TABLE IF NOT EXISTS: never destructive, never fails on repeat
    - Seed row looked up by full_name and inserted only when absent
    - Safe against a persistent store: no reliance on in-process state

Design Decisions:
    - Factory passed in explicitly, no global registry
    - No locking: concurrent initializers rely on the store's per-statement atomicity
"""

import logging

from sqlalchemy import insert, select
from sqlalchemy.schema import CreateTable

from users_api.core.domain_types import new_user_id
from users_api.infrastructure.database import DatabaseConnectionFactory
from users_api.models.user import UserRecord

logger = logging.getLogger(__name__)

DEFAULT_SEED_FULL_NAME = "Nick Chapsas"

_users = UserRecord.__table__


class DatabaseInitializer:
    """Ensures the users table exists and holds the well-known seed user."""

    def __init__(
        self,
        connection_factory: DatabaseConnectionFactory,
        seed_full_name: str = DEFAULT_SEED_FULL_NAME,
    ):
        self._connection_factory = connection_factory
        self.seed_full_name = seed_full_name

    async def initialize(self) -> None:
        conn = await self._connection_factory.create_connection()
        try:
            await conn.execute(CreateTable(_users, if_not_exists=True))
            existing = (
                await conn.execute(
                    select(_users.c.id).where(
                        _users.c.full_name == self.seed_full_name,
                    ),
                )
            ).first()
            if existing is None:
                seed_id = new_user_id()
                await conn.execute(
                    insert(_users).values(
                        id=seed_id, full_name=self.seed_full_name,
                    ),
                )
                logger.info(
                    f"Seed user '{self.seed_full_name}' created",
                    extra={"operation": "seed", "user_id": str(seed_id)},
                )
            else:
                logger.info(
                    f"Seed user '{self.seed_full_name}' already present",
                    extra={"operation": "seed", "user_id": str(existing.id)},
                )
            await conn.commit()
        finally:
            await conn.close()
