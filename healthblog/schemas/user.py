from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from healthblog.models.user import USER_ROLES
from healthblog.schemas.base import CamelModel

ROLE_REQUIRED_MESSAGE = "Valid role (user or admin) is required"


class UserResponse(CamelModel):
    """Public user view (never includes the password hash)."""

    id: UUID
    name: str
    email: str
    role: str
    created_at: datetime | None = None


class AdminUserResponse(UserResponse):
    """User row in the admin listing."""

    bookmarks_count: int = 0


class RoleUpdate(CamelModel):
    """Body of ``PUT /api/admin/users/{id}/role``."""

    role: str = Field(examples=["admin"])

    @model_validator(mode="before")
    @classmethod
    def require_role(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("role"):
            raise ValueError(ROLE_REQUIRED_MESSAGE)
        return data

    @field_validator("role")
    @classmethod
    def validate_role(cls, value: str) -> str:
        if value not in USER_ROLES:
            raise ValueError(ROLE_REQUIRED_MESSAGE)
        return value
