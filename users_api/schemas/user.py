"""User Schemas — wire format for the users endpoints.

Invariants:
    - JSON fields are camelCase (fullName); Python attributes stay snake_case
    - UserCreate.full_name: 1-200 chars after stripping, never whitespace-only
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from users_api.core.domain_types import User


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreate(_CamelModel):
    """Create request — the id is assigned server-side."""
    full_name: str = Field(min_length=1, max_length=200)

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("fullName cannot be empty or whitespace")
        return v


class UserResponse(_CamelModel):
    id: UUID
    full_name: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, full_name=user.full_name)
