"""ORM Models — SQLAlchemy declarative models.

Design Decisions:
    - One file per entity; imported here so Base.metadata is populated
"""

from users_api.models.user import UserRecord  # noqa: F401
