from typing import Any
from uuid import UUID

from pydantic import model_validator

from healthblog.schemas.base import CamelModel


class BookmarkRequest(CamelModel):
    """Body of ``POST /api/bookmarks``."""

    blog_id: UUID

    @model_validator(mode="before")
    @classmethod
    def require_blog_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and not (data.get("blogId") or data.get("blog_id")):
            mssg = "Blog ID is required"
            raise ValueError(mssg)
        return data
