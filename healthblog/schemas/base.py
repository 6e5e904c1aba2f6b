"""Shared schema base and response envelope helpers."""

from collections.abc import Mapping, Sequence
from typing import Any

from fastapi.responses import ORJSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from starlette.status import HTTP_200_OK

from healthblog.utils.helpers import page_count


class CamelModel(BaseModel):
    """Base schema serialised with camelCase keys, accepting either case on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    """Page metadata attached to every list payload."""

    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total: int = Field(ge=0)
    pages: int = Field(ge=0)

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=page_count(total, limit))


class Page[ItemT](CamelModel):
    """A page of results: ``{"items": [...], "pagination": {...}}``."""

    items: list[ItemT]
    pagination: Pagination


def dump(value: Any) -> Any:
    """
    Convert schemas (and containers of schemas) into JSON-ready data.

    Args:
        value: A pydantic model, a list/tuple of them, a mapping or a plain value

    Returns:
        Any: Data with camelCase keys for every model found
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, Mapping):
        return {key: dump(item) for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        return [dump(item) for item in value]
    return value


def success_response(
    message: str,
    data: Any = None,
    status_code: int = HTTP_200_OK,
) -> ORJSONResponse:
    """
    Build the success envelope ``{"success": true, "message": ..., "data"?: ...}``.

    ``data`` is omitted when ``None``.
    """
    content: dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        content["data"] = dump(data)
    return ORJSONResponse(content=content, status_code=status_code)
