"""Tests for the bookmark service."""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from healthblog.auth import AuthContext
from healthblog.errors import NotFoundError
from healthblog.models import BlogDB, UserDB
from healthblog.repositories import BlogRepository, UserRepository
from healthblog.services import BookmarkService


@pytest.fixture
def service(session: AsyncSession) -> BookmarkService:
    return BookmarkService(UserRepository(session), BlogRepository(session))


@pytest.fixture
async def reader(session: AsyncSession) -> UserDB:
    return await UserRepository(session).create(
        {
            "name": "Reader",
            "email": "reader@example.com",
            "password_hash": "$argon2id$placeholder",
        },
    )


@pytest.fixture
def auth(reader: UserDB) -> AuthContext:
    return AuthContext(user_id=reader.id, email=reader.email, role=reader.role)


@pytest.fixture
async def posts(session: AsyncSession, reader: UserDB) -> list[BlogDB]:
    repo = BlogRepository(session)
    return [
        await repo.create(
            {
                "title": title,
                "content": "Body",
                "category": "Lifestyle",
                "tags": [],
                "author_id": reader.id,
            },
        )
        for title in ("One", "Two", "Three")
    ]


class TestBookmarkService:
    """Test cases for BookmarkService."""

    async def test_add_and_list(
        self,
        service: BookmarkService,
        auth: AuthContext,
        posts: list[BlogDB],
    ) -> None:
        """Test that bookmarks are listed most recently bookmarked first, with authors."""
        one, two, three = posts
        for blog in (two, one, three):
            await service.add_bookmark(auth, blog.id)

        bookmarks = await service.get_user_bookmarks(auth)

        assert [blog.title for blog in bookmarks] == ["Three", "One", "Two"]
        assert bookmarks[0].author is not None
        assert bookmarks[0].author.name == "Reader"

    async def test_add_twice_keeps_one(
        self,
        service: BookmarkService,
        auth: AuthContext,
        posts: list[BlogDB],
    ) -> None:
        """Test that bookmarking twice is not an error and stores one bookmark."""
        await service.add_bookmark(auth, posts[0].id)
        await service.add_bookmark(auth, posts[0].id)

        assert len(await service.get_user_bookmarks(auth)) == 1

    async def test_add_unknown_blog(self, service: BookmarkService, auth: AuthContext) -> None:
        """Test that bookmarking a missing post is NotFoundError."""
        with pytest.raises(NotFoundError, match="Blog not found"):
            await service.add_bookmark(auth, uuid4())

    async def test_remove_is_idempotent(
        self,
        service: BookmarkService,
        auth: AuthContext,
        posts: list[BlogDB],
    ) -> None:
        """Test that removing twice, or removing an unknown id, succeeds."""
        await service.add_bookmark(auth, posts[0].id)

        await service.remove_bookmark(auth, posts[0].id)
        await service.remove_bookmark(auth, posts[0].id)
        await service.remove_bookmark(auth, uuid4())

        assert await service.get_user_bookmarks(auth) == []

    async def test_deleted_blog_is_skipped(
        self,
        service: BookmarkService,
        auth: AuthContext,
        posts: list[BlogDB],
    ) -> None:
        """Test that bookmarks of deleted posts are left out of the listing."""
        for blog in posts:
            await service.add_bookmark(auth, blog.id)
        await service.blog_repo.delete_by_id(posts[1].id)

        bookmarks = await service.get_user_bookmarks(auth)

        assert [blog.title for blog in bookmarks] == ["Three", "One"]
