from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from healthblog.configs.settings import MAX_NAME_LENGTH
from healthblog.schemas.base import CamelModel
from healthblog.schemas.validators import is_blank


class CategoryCreate(CamelModel):
    name: str = Field(max_length=MAX_NAME_LENGTH, examples=["Nutrition"])
    description: str | None = Field(default=None, max_length=500)

    @model_validator(mode="before")
    @classmethod
    def require_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and is_blank(data.get("name")):
            mssg = "Category name is required"
            raise ValueError(mssg)
        return data

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return value.strip()


class CategoryUpdate(CamelModel):
    name: str | None = Field(default=None, max_length=MAX_NAME_LENGTH)
    description: str | None = Field(default=None, max_length=500)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str | None) -> str:
        # Runs only for a name that was sent; an explicit null is as bad as blank
        if value is None or is_blank(value):
            mssg = "Category name cannot be empty"
            raise ValueError(mssg)
        return value.strip()


class CategoryResponse(CamelModel):
    id: UUID
    name: str
    description: str | None = None
    created_at: datetime
