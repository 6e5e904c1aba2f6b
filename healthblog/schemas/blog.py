"""
Blog post schemas.

Request bodies accept camelCase (``coverImage``) or snake_case keys;
responses are always camelCase.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from healthblog.configs.settings import MAX_NAME_LENGTH, MAX_TAGS_COUNT, MAX_TITLE_LENGTH
from healthblog.schemas.base import CamelModel
from healthblog.schemas.validators import is_blank

REQUIRED_FIELDS = ("title", "content", "category")


def clean_tags(tags: list[str]) -> list[str]:
    """Strip each tag, keeping order and repeats. Blank tags are rejected."""
    stripped = [tag.strip() for tag in tags]
    if not all(stripped):
        mssg = "Tags cannot be empty"
        raise ValueError(mssg)
    return stripped


class AuthorSummary(CamelModel):
    """Author details embedded in blog responses."""

    name: str
    email: str


class BlogCreate(CamelModel):
    """Blog creation body (the author comes from the caller's token)."""

    title: str = Field(max_length=MAX_TITLE_LENGTH, examples=["10 Foods That Boost Immunity"])
    content: str = Field(examples=["A strong immune system starts with what you eat..."])
    cover_image: str = Field(default="", max_length=500)
    category: str = Field(max_length=MAX_NAME_LENGTH, examples=["Nutrition"])
    tags: list[str] = Field(
        default_factory=list,
        max_length=MAX_TAGS_COUNT,
        examples=[["immunity", "nutrition"]],
    )

    @model_validator(mode="before")
    @classmethod
    def require_fields(cls, data: Any) -> Any:
        if isinstance(data, dict) and any(is_blank(data.get(key)) for key in REQUIRED_FIELDS):
            mssg = "Title, content and category are required"
            raise ValueError(mssg)
        return data

    @field_validator("title", "category")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, value: list[str]) -> list[str]:
        return clean_tags(value)


class BlogUpdate(CamelModel):
    """Partial blog update; only the fields sent are changed."""

    title: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH)
    content: str | None = None
    cover_image: str | None = Field(default=None, max_length=500)
    category: str | None = Field(default=None, max_length=MAX_NAME_LENGTH)
    tags: list[str] | None = Field(default=None, max_length=MAX_TAGS_COUNT)

    @model_validator(mode="after")
    def reject_blank_required(self) -> "BlogUpdate":
        for key in REQUIRED_FIELDS:
            if key in self.model_fields_set and is_blank(getattr(self, key)):
                mssg = "Title, content and category cannot be empty"
                raise ValueError(mssg)
        return self

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, value: list[str] | None) -> list[str]:
        return [] if value is None else clean_tags(value)

    @field_validator("cover_image")
    @classmethod
    def clear_cover_image(cls, value: str | None) -> str:
        return "" if value is None else value


class BlogResponse(CamelModel):
    """A blog post with its author resolved (``None`` if the author is gone)."""

    id: UUID
    title: str
    content: str
    cover_image: str = ""
    author_id: UUID
    author: AuthorSummary | None = None
    category: str
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime | None = None


class BlogDetail(CamelModel):
    """Single blog lookup: the post plus up to five related posts."""

    blog: BlogResponse
    related_blogs: list[BlogResponse] = Field(default_factory=list)


class BlogFilters(BaseModel):
    """Optional filters combined with AND when listing blogs."""

    model_config = ConfigDict(frozen=True)

    category: str | None = None
    tags: tuple[str, ...] = ()
    search: str | None = None
