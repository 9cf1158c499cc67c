"""Boundary Protocols — contract between the service and persistence.

Invariants:
    - Service depends on UserRepository, never on a concrete implementation
    - Not-found is data (None / False), never an exception

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy.
      The SQL repository and test fakes are independent implementations.
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from users_api.core.domain_types import User, UserId


class UserRepository(Protocol):
    """Contract for user persistence — implemented by infrastructure."""
    async def get_all(self) -> list[User]: ...
    async def get_by_id(self, user_id: UserId) -> User | None: ...
    async def create(self, user: User) -> bool: ...
    async def delete_by_id(self, user_id: UserId) -> bool: ...
