"""Blog post database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime, Index, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from healthblog.utils.helpers import utc_now


class BlogDB(SQLModel, table=True):
    """
    Blog post database model.

    ``author_id`` references ``users.id`` by convention only. There is no
    foreign key, so removing a user leaves their posts in place and the
    author resolves to ``None`` on read. ``category`` is free text matched
    against ``categories.name``.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (Index("ix_blogs_category_created", "category", "created_at"),)

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )
    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog title",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog content",
    )
    cover_image: str = Field(
        default="",
        sa_column=Column(String(500), nullable=False, server_default=""),
        description="Cover image URL",
    )
    author_id: UUID = Field(
        nullable=False,
        index=True,
        description="Author ID (users.id, not enforced)",
    )
    category: str = Field(
        sa_column=Column(String(100), nullable=False, index=True),
        description="Category name",
    )
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON().with_variant(JSONB, "postgresql"), nullable=False),
        description="Ordered list of tags",
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "10 Foods That Boost Your Immune System",
                "content": "A strong immune system starts with what you eat...",
                "cover_image": "https://example.com/immune.jpg",
                "author_id": "123e4567-e89b-12d3-a456-426614174000",
                "category": "Nutrition",
                "tags": ["immunity", "nutrition", "health"],
            },
        },
    )
