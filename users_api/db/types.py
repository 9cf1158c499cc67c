"""Column Types — UUID stored as its canonical hyphenated string.

Invariants:
    - Bound values are always str(UUID) ("xxxxxxxx-xxxx-...")
    - Result values are always uuid.UUID

Design Decisions:
    - TypeDecorator over sqlalchemy.Uuid: Uuid stores 32-char hex on SQLite,
      the table layout requires the canonical form
"""

import uuid

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class UuidString(TypeDecorator):
    """UUID <-> canonical string at the store boundary."""

    impl = String(36)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return uuid.UUID(value)
