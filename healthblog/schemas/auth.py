from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from healthblog.configs.settings import MAX_NAME_LENGTH, MIN_PASSWORD_LENGTH
from healthblog.schemas.base import CamelModel
from healthblog.schemas.user import UserResponse
from healthblog.schemas.validators import checked_email, is_blank


class TokenData(BaseModel):
    """Verified claims extracted from an access token."""

    user_id: UUID
    email: str
    role: str
    jti: str
    expires_at: datetime


class UserRegister(CamelModel):
    """Registration request body."""

    name: str | None = Field(default=None, max_length=MAX_NAME_LENGTH, examples=["Jane Doe"])
    email: str | None = Field(default=None, examples=["jane@example.com"])
    password: str | None = Field(default=None, examples=["s3cret-pass"])

    @model_validator(mode="before")
    @classmethod
    def require_fields(cls, data: Any) -> Any:
        if isinstance(data, dict) and any(
            is_blank(data.get(key)) for key in ("name", "email", "password")
        ):
            mssg = "Name, email and password are required"
            raise ValueError(mssg)
        return data

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return value.strip()

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, value: str) -> str:
        return checked_email(value)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            mssg = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            raise ValueError(mssg)
        return value


class UserLogin(CamelModel):
    """Login request body."""

    email: str | None = Field(default=None, examples=["jane@example.com"])
    password: str | None = Field(default=None, examples=["s3cret-pass"])

    @model_validator(mode="before")
    @classmethod
    def require_fields(cls, data: Any) -> Any:
        if isinstance(data, dict) and any(is_blank(data.get(key)) for key in ("email", "password")):
            mssg = "Email and password are required"
            raise ValueError(mssg)
        return data

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, value: str) -> str:
        return checked_email(value)


class AuthResult(CamelModel):
    """Successful register/login payload."""

    user: UserResponse
    token: str
