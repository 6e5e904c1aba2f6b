"""
Filter helpers shared by all repositories.

A plain mapping covers the common case: ``{"role": "user"}`` is an equality
test and ``{"id": [a, b]}`` a membership test. Anything richer is built
with the clause helpers below and passed as ``where=``.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime
from json import dumps
from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, String, cast, false, or_
from sqlmodel import SQLModel

type FilterValue = str | int | float | bool | UUID | datetime | None
type Filters = Mapping[str, FilterValue | list[FilterValue] | tuple[FilterValue, ...] | set[Any]]


def column_of(model: type[SQLModel], field_name: str) -> Any:
    """
    Resolve a model attribute to its column.

    Raises:
        AttributeError: If the model has no such field
    """
    try:
        return getattr(model, field_name)
    except AttributeError as e:
        mssg = f"{model.__name__} has no field '{field_name}'"
        raise AttributeError(mssg) from e


def build_conditions(
    model: type[SQLModel],
    filters: Filters | None,
) -> list[ColumnElement[bool]]:
    """
    Turn a filter mapping into SQL conditions.

    Args:
        model: Model whose columns are filtered
        filters: Field name to value; collections become ``IN``

    Returns:
        list[ColumnElement[bool]]: Conditions to AND together
    """
    conditions: list[ColumnElement[bool]] = []
    for field_name, value in (filters or {}).items():
        column = column_of(model, field_name)
        if isinstance(value, list | tuple | set | frozenset):
            conditions.append(column.in_(list(value)) if value else false())
        elif value is None:
            conditions.append(column.is_(None))
        else:
            conditions.append(column == value)
    return conditions


def search_clause(columns: Iterable[Any], term: str) -> ColumnElement[bool]:
    """
    Case-insensitive substring match of ``term`` against any of ``columns``.

    ``%`` and ``_`` in the term are matched literally.
    """
    return or_(*(column.icontains(term, autoescape=True) for column in columns))


def _tag_patterns(tag: str) -> set[str]:
    # Backends differ on whether non-ASCII text inside stored JSON is escaped
    return {dumps(tag), dumps(tag, ensure_ascii=False)}


def tags_overlap_clause(column: Any, tags: Iterable[str]) -> ColumnElement[bool]:
    """
    Match rows whose JSON list ``column`` shares at least one tag with ``tags``.

    Each tag is compared as a quoted JSON string, so ``"run"`` does not match
    ``"running"``. An empty ``tags`` matches nothing.
    """
    as_text = cast(column, String)
    patterns = [pattern for tag in tags for pattern in sorted(_tag_patterns(tag))]
    if not patterns:
        return false()
    return or_(*(as_text.contains(pattern, autoescape=True) for pattern in patterns))


def exclude_id_clause(
    model: type[SQLModel],
    record_id: UUID,
    id_field: str = "id",
) -> ColumnElement[bool]:
    """Exclude a single record by primary key."""
    return column_of(model, id_field) != record_id
