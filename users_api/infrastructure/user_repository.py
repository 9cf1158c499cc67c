"""SQL User Repository — one parameterized statement per CRUD operation.

Invariants:
    - Holds no state beyond the connection factory
    - Each call acquires its own connection and closes it in `finally`
    - Statement errors (IntegrityError, OperationalError, ...) propagate unchanged
    - Not-found is None / False, never an exception

Design Decisions:
    - Core statements on AsyncConnection over ORM sessions: one statement,
      one round-trip, rows mapped by hand to the core User dataclass
    - create() does not pre-check existence: a duplicate id raises IntegrityError
"""

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Row

from users_api.core.domain_types import User, UserId
from users_api.infrastructure.database import DatabaseConnectionFactory
from users_api.models.user import UserRecord

_users = UserRecord.__table__


def _to_user(row: Row) -> User:
    return User(id=UserId(row.id), full_name=row.full_name)


class SqlUserRepository:
    """UserRepository backed by the configured SQL store."""

    def __init__(self, connection_factory: DatabaseConnectionFactory):
        self._connection_factory = connection_factory

    async def get_all(self) -> list[User]:
        conn = await self._connection_factory.create_connection()
        try:
            result = await conn.execute(
                select(_users.c.id, _users.c.full_name),
            )
            return [_to_user(row) for row in result]
        finally:
            await conn.close()

    async def get_by_id(self, user_id: UserId) -> User | None:
        conn = await self._connection_factory.create_connection()
        try:
            result = await conn.execute(
                select(_users.c.id, _users.c.full_name).where(
                    _users.c.id == user_id,
                ),
            )
            row = result.one_or_none()
            return _to_user(row) if row is not None else None
        finally:
            await conn.close()

    async def create(self, user: User) -> bool:
        conn = await self._connection_factory.create_connection()
        try:
            result = await conn.execute(
                insert(_users).values(id=user.id, full_name=user.full_name),
            )
            await conn.commit()
            return result.rowcount == 1
        finally:
            await conn.close()

    async def delete_by_id(self, user_id: UserId) -> bool:
        conn = await self._connection_factory.create_connection()
        try:
            result = await conn.execute(
                delete(_users).where(_users.c.id == user_id),
            )
            await conn.commit()
            return result.rowcount > 0
        finally:
            await conn.close()
