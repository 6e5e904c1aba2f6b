"""Newsletter subscriber database model."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from healthblog.utils.helpers import utc_now


class SubscriberDB(SQLModel, table=True):
    __tablename__ = cast("declared_attr[str]", "subscribers")

    id: UUID = Field(default_factory=uuid4, primary_key=True, nullable=False)
    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True),
        description="Subscriber email (unique, lower-cased)",
    )
    subscribed_on: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Subscription timestamp",
    )
