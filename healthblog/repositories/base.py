"""Base repository for database operations."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from healthblog.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)
from healthblog.repositories.filters import Filters, build_conditions, column_of
from healthblog.utils.helpers import utc_now


@dataclass(frozen=True)
class Reference:
    """
    A reference field to resolve during :meth:`BaseRepository.populate`.

    Attributes:
        field: Name of the id-holding field on the source record
        model: Target model the id points at
        target: Key under which the resolved entity is stored
        fields: Target fields to keep (all fields when empty)
    """

    field: str
    model: type[SQLModel]
    target: str
    fields: tuple[str, ...] = ()


class BaseRepository[ModelT: SQLModel, CreateSchemaT: BaseModel, UpdateSchemaT: BaseModel]:
    """
    Base repository implementing common CRUD operations.

    Every method issues a single statement against the session. Filters are
    given as a mapping (see :mod:`healthblog.repositories.filters`) and/or
    as prepared SQL conditions through ``where``.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
        sort_field: Default ordering field, newest first.
    """

    model: type[ModelT]
    id_field: str = "id"
    sort_field: str = "created_at"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    @property
    def _id_column(self) -> Any:
        return column_of(self.model, self.id_field)

    def _conditions(
        self,
        filters: Filters | None,
        where: Iterable[ColumnElement[bool]],
    ) -> list[ColumnElement[bool]]:
        return [*build_conditions(self.model, filters), *where]

    async def create(self, data: CreateSchemaT | Mapping[str, Any]) -> ModelT:
        """
        Create a new record in the database.

        Args:
            data: Creation schema or plain mapping of field values

        Returns:
            ModelT: Created database model

        Raises:
            DuplicateEntryError: If a unique constraint is violated
        """
        values = data.model_dump(exclude_unset=True) if isinstance(data, BaseModel) else dict(data)
        db_obj = self.model.model_validate(values)
        return await self._add_and_refresh(db_obj)

    async def find_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        statement = select(self.model).where(self._id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def find_one(
        self,
        filters: Filters | None = None,
        *,
        where: Iterable[ColumnElement[bool]] = (),
    ) -> ModelT | None:
        """
        Get the first record matching the filters.

        Args:
            filters: Field/value filter mapping
            where: Extra prepared conditions

        Returns:
            ModelT | None: Matching record, None if there is none
        """
        statement = select(self.model).where(*self._conditions(filters, where)).limit(1)
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def find_many(
        self,
        filters: Filters | None = None,
        *,
        where: Iterable[ColumnElement[bool]] = (),
        limit: int | None = None,
        skip: int = 0,
        sort: str | None = None,
        descending: bool = True,
    ) -> list[ModelT]:
        """
        Get records matching the filters, sorted and paginated.

        Args:
            filters: Field/value filter mapping
            where: Extra prepared conditions
            limit: Maximum number of records (all when None)
            skip: Number of records to skip
            sort: Field to order by (defaults to ``sort_field``)
            descending: Newest/largest first when True

        Returns:
            list[ModelT]: Matching records
        """
        order_column = column_of(self.model, sort or self.sort_field)
        statement = (
            select(self.model)
            .where(*self._conditions(filters, where))
            .order_by(order_column.desc() if descending else order_column.asc())
            .offset(skip)
        )
        if limit is not None:
            statement = statement.limit(limit)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def find_by_ids(self, record_ids: Iterable[UUID]) -> dict[UUID, ModelT]:
        """
        Batch fetch records by ID.

        Args:
            record_ids: IDs to fetch (duplicates are ignored)

        Returns:
            dict[UUID, ModelT]: Found records keyed by ID; missing IDs are absent
        """
        ids = set(record_ids)
        if not ids:
            return {}
        statement = select(self.model).where(self._id_column.in_(ids))
        result = await self.session.execute(statement)
        return {getattr(record, self.id_field): record for record in result.scalars().all()}

    async def update_by_id(
        self,
        record_id: UUID,
        data: UpdateSchemaT | Mapping[str, Any],
    ) -> ModelT | None:
        """
        Merge the given fields into a record.

        Only fields explicitly set on the schema are written. ``updated_at``
        is bumped on models that have it.

        Args:
            record_id: Record UUID
            data: Update schema or mapping with fields to change

        Returns:
            ModelT | None: Updated record if found, None otherwise
        """
        db_obj = await self.find_by_id(record_id)
        if not db_obj:
            return None

        values = data.model_dump(exclude_unset=True) if isinstance(data, BaseModel) else dict(data)
        for key, value in values.items():
            setattr(db_obj, key, value)
        if "updated_at" in type(db_obj).model_fields:
            db_obj.updated_at = utc_now()  # type: ignore[attr-defined]

        return await self._add_and_refresh(db_obj)

    async def delete_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Delete a record by ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: The deleted record, None if it did not exist
        """
        record = await self.find_by_id(record_id)
        if not record:
            return None

        await self.session.delete(record)
        await self.session.flush()
        return record

    async def exists(self, record_id: UUID) -> bool:
        """Check if a record exists without loading it."""
        statement = select(1).where(self._id_column == record_id).limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none() is not None

    async def count(
        self,
        filters: Filters | None = None,
        *,
        where: Iterable[ColumnElement[bool]] = (),
    ) -> int:
        """
        Count records matching the filters.

        Returns:
            int: Number of matching records
        """
        statement = (
            select(func.count())
            .select_from(self.model)
            .where(*self._conditions(filters, where))
        )
        result = await self.session.execute(statement)
        count = result.scalar()
        return count if count is not None else 0

    async def populate(
        self,
        records: Sequence[ModelT],
        *references: Reference,
    ) -> list[dict[str, Any]]:
        """
        Serialise records and resolve their reference fields.

        One batched ``IN`` query is issued per reference. A reference whose
        target no longer exists resolves to ``None``.

        Args:
            records: Records to serialise
            *references: Reference fields to resolve

        Returns:
            list[dict[str, Any]]: One dict per record, in input order
        """
        rows = [record.model_dump() for record in records]
        for reference in references:
            ids = {row[reference.field] for row in rows if row.get(reference.field)}
            targets: dict[Any, SQLModel] = {}
            if ids:
                target_id = column_of(reference.model, "id")
                result = await self.session.execute(
                    select(reference.model).where(target_id.in_(ids)),
                )
                targets = {
                    target.id: target  # type: ignore[attr-defined]
                    for target in result.scalars().all()
                }

            include = set(reference.fields) or None
            for row in rows:
                target = targets.get(row.get(reference.field))
                row[reference.target] = target.model_dump(include=include) if target else None
        return rows

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            DatabaseConnectionError: For any other database failure
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to save record: {e}") from e
        return record
