from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from healthblog.schemas.base import CamelModel
from healthblog.schemas.validators import checked_email, is_blank


class NewsletterRequest(CamelModel):
    """Body for subscribe and unsubscribe."""

    email: str = Field(examples=["reader@example.com"])

    @model_validator(mode="before")
    @classmethod
    def require_email(cls, data: Any) -> Any:
        if isinstance(data, dict) and is_blank(data.get("email")):
            mssg = "Email is required"
            raise ValueError(mssg)
        return data

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, value: str) -> str:
        return checked_email(value, "Invalid email format")


class SubscriberResponse(CamelModel):
    id: UUID
    email: str
    subscribed_on: datetime
