"""User repository, including the user's bookmark set."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import delete, func, insert, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from healthblog.models.bookmark import BookmarkDB
from healthblog.models.user import UserDB
from healthblog.repositories.base import BaseRepository
from healthblog.schemas.auth import UserRegister
from healthblog.schemas.user import RoleUpdate
from healthblog.utils.helpers import normalize_email, utc_now

# Dialects with INSERT ... ON CONFLICT DO NOTHING
CONFLICT_FREE_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class UserRepository(BaseRepository[UserDB, UserRegister, RoleUpdate]):
    """Repository for users and their bookmarks."""

    model = UserDB

    async def find_by_email(self, email: str) -> UserDB | None:
        """
        Get a user by email, ignoring case and surrounding whitespace.

        Args:
            email: Email address

        Returns:
            UserDB | None: User if found, None otherwise
        """
        return await self.find_one({"email": normalize_email(email)})

    async def email_exists(self, email: str) -> bool:
        statement = select(1).where(UserDB.email == normalize_email(email)).limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none() is not None

    async def add_bookmark(self, user_id: UUID, blog_id: UUID) -> bool:
        """
        Add ``blog_id`` to the user's bookmarks.

        Adding an existing bookmark is a no-op, including when two requests
        race to add the same one.

        Returns:
            bool: True if a new bookmark was stored
        """
        values = {"user_id": user_id, "blog_id": blog_id, "created_at": utc_now()}
        dialect = self.session.get_bind().dialect.name

        if dialect_insert := CONFLICT_FREE_INSERTS.get(dialect):
            statement = dialect_insert(BookmarkDB).values(**values).on_conflict_do_nothing()
            result = await self.session.execute(statement)
            return bool(result.rowcount)

        if await self.has_bookmark(user_id, blog_id):
            return False
        await self.session.execute(insert(BookmarkDB).values(**values))
        return True

    async def remove_bookmark(self, user_id: UUID, blog_id: UUID) -> bool:
        """
        Remove ``blog_id`` from the user's bookmarks.

        Returns:
            bool: True if a bookmark was removed, False if there was none
        """
        statement = delete(BookmarkDB).where(
            BookmarkDB.user_id == user_id,
            BookmarkDB.blog_id == blog_id,
        )
        result = await self.session.execute(statement)
        return bool(result.rowcount)

    async def remove_all_bookmarks(self, user_id: UUID) -> int:
        """Drop every bookmark owned by a user; returns how many were removed."""
        statement = delete(BookmarkDB).where(BookmarkDB.user_id == user_id)
        result = await self.session.execute(statement)
        return result.rowcount or 0

    async def has_bookmark(self, user_id: UUID, blog_id: UUID) -> bool:
        statement = (
            select(1)
            .where(BookmarkDB.user_id == user_id, BookmarkDB.blog_id == blog_id)
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none() is not None

    async def bookmarked_blog_ids(self, user_id: UUID) -> list[UUID]:
        """
        IDs the user has bookmarked, most recently bookmarked first.

        Returns:
            list[UUID]: Blog IDs (posts may since have been deleted)
        """
        statement = (
            select(BookmarkDB.blog_id)
            .where(BookmarkDB.user_id == user_id)
            .order_by(BookmarkDB.created_at.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def bookmark_counts(self, user_ids: Iterable[UUID]) -> dict[UUID, int]:
        """
        Number of bookmarks per user, in one grouped query.

        Returns:
            dict[UUID, int]: Counts keyed by user; users without bookmarks are absent
        """
        ids = set(user_ids)
        if not ids:
            return {}
        statement = (
            select(BookmarkDB.user_id, func.count())
            .where(BookmarkDB.user_id.in_(ids))
            .group_by(BookmarkDB.user_id)
        )
        result = await self.session.execute(statement)
        return {user_id: count for user_id, count in result.all()}
