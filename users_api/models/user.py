"""User ORM — table mapping for the User entity.

Invariants:
    - id is the primary key, stored as canonical UUID text, assigned by the caller
    - full_name is non-nullable text

Design Decisions:
    - No server/default id: identifiers are generated before the write
"""

import uuid

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from users_api.db.base import Base
from users_api.db.types import UuidString


class UserRecord(Base):
    """Row in the `users` table."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(UuidString(), primary_key=True)
    full_name: Mapped[str] = mapped_column(Text, nullable=False)
