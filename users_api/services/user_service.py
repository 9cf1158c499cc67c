"""User Service — logging and timing around every repository call.

Invariants:
    - Every call logs exactly one start entry before delegating
    - Every call logs exactly one "... in Nms" entry with duration_ms >= 0,
      from `finally`, on success and failure alike
    - Failure additionally logs exactly one error entry carrying the original
      exception, then re-raises that same exception (no wrapping, no retry)
    - Results pass through unchanged; None / False are not failures
    - No state between calls; every call round-trips to the store

Design Decisions:
    - Logging written inline per method, not a decorator: success and error
      paths stay visible and independently testable
    - Logger injectable for tests; defaults to the module logger
"""

import logging
import time

from users_api.core.domain_types import User, UserId
from users_api.core.repository_protocols import UserRepository


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class UserService:
    """Sole entry point the HTTP layer uses for user operations."""

    def __init__(
        self, repository: UserRepository, logger: logging.Logger | None = None,
    ):
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    async def get_all(self) -> list[User]:
        fields = {"operation": "get_all"}
        self._logger.info("Retrieving all users", extra=fields)
        started = time.perf_counter()
        try:
            return await self._repository.get_all()
        except Exception as e:
            self._logger.error(
                "Something went wrong while retrieving all users",
                exc_info=e, extra=fields,
            )
            raise
        finally:
            elapsed = _elapsed_ms(started)
            self._logger.info(
                f"All users retrieved in {elapsed}ms",
                extra={**fields, "duration_ms": elapsed},
            )

    async def get_by_id(self, user_id: UserId) -> User | None:
        fields = {"operation": "get_by_id", "user_id": str(user_id)}
        self._logger.info(f"Retrieving user with id: {user_id}", extra=fields)
        started = time.perf_counter()
        try:
            return await self._repository.get_by_id(user_id)
        except Exception as e:
            self._logger.error(
                f"Something went wrong while retrieving user with id {user_id}",
                exc_info=e, extra=fields,
            )
            raise
        finally:
            elapsed = _elapsed_ms(started)
            self._logger.info(
                f"User with id {user_id} retrieved in {elapsed}ms",
                extra={**fields, "duration_ms": elapsed},
            )

    async def create(self, user: User) -> bool:
        fields = {"operation": "create", "user_id": str(user.id)}
        self._logger.info(
            f"Creating user with id {user.id} and name: {user.full_name}",
            extra=fields,
        )
        started = time.perf_counter()
        try:
            return await self._repository.create(user)
        except Exception as e:
            self._logger.error(
                "Something went wrong while creating a user",
                exc_info=e, extra=fields,
            )
            raise
        finally:
            elapsed = _elapsed_ms(started)
            self._logger.info(
                f"User with id {user.id} created in {elapsed}ms",
                extra={**fields, "duration_ms": elapsed},
            )

    async def delete_by_id(self, user_id: UserId) -> bool:
        fields = {"operation": "delete_by_id", "user_id": str(user_id)}
        self._logger.info(f"Deleting user with id: {user_id}", extra=fields)
        started = time.perf_counter()
        try:
            return await self._repository.delete_by_id(user_id)
        except Exception as e:
            self._logger.error(
                f"Something went wrong while deleting user with id {user_id}",
                exc_info=e, extra=fields,
            )
            raise
        finally:
            elapsed = _elapsed_ms(started)
            self._logger.info(
                f"User with id {user_id} deleted in {elapsed}ms",
                extra={**fields, "duration_ms": elapsed},
            )
