"""Domain Types — the User entity and its identity type.

Invariants:
    - UserId wraps a UUID and is assigned by the caller before the write
    - User is immutable once built (frozen dataclass)

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, full type-checker support
    - Plain dataclass, not the ORM model: core never depends on persistence
"""

from dataclasses import dataclass
from typing import NewType
from uuid import UUID, uuid4


UserId = NewType("UserId", UUID)


def new_user_id() -> UserId:
    return UserId(uuid4())


@dataclass(frozen=True)
class User:
    """A stored user. `id` is unique across the store and never reassigned."""
    id: UserId
    full_name: str
