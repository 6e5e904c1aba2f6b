"""Bookmark association model."""

from datetime import datetime
from typing import cast
from uuid import UUID

from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel

from healthblog.utils.helpers import utc_now


class BookmarkDB(SQLModel, table=True):
    """
    A user's bookmark on a blog post.

    The composite primary key makes a user's bookmarks a set: the same
    (user, blog) pair can only be stored once. Neither column is a foreign
    key; bookmarks of deleted posts are skipped when read.
    """

    __tablename__ = cast("declared_attr[str]", "bookmarks")

    user_id: UUID = Field(primary_key=True, nullable=False)
    blog_id: UUID = Field(primary_key=True, nullable=False, index=True)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
