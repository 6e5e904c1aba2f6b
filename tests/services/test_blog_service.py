"""Tests for the blog service."""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from healthblog.auth import AuthContext
from healthblog.errors import NotFoundError
from healthblog.models import UserDB
from healthblog.repositories import BlogRepository, UserRepository
from healthblog.schemas import BlogCreate, BlogFilters, BlogUpdate
from healthblog.services import BlogService


@pytest.fixture
def service(session: AsyncSession) -> BlogService:
    return BlogService(BlogRepository(session), UserRepository(session))


@pytest.fixture
async def admin(session: AsyncSession) -> UserDB:
    return await UserRepository(session).create(
        {
            "name": "Admin User",
            "email": "admin@healthblog.com",
            "password_hash": "$argon2id$placeholder",
            "role": "admin",
        },
    )


@pytest.fixture
def admin_auth(admin: UserDB) -> AuthContext:
    return AuthContext(user_id=admin.id, email=admin.email, role=admin.role)


def _body(title: str = "Hydration Basics", **extra: object) -> BlogCreate:
    values: dict[str, object] = {
        "title": title,
        "content": "Drink water throughout the day.",
        "category": "Nutrition",
        "tags": ["water"],
    }
    values.update(extra)
    return BlogCreate.model_validate(values)


class TestCreateBlog:
    """Test cases for BlogService.create_blog."""

    async def test_author_is_caller(self, service: BlogService, admin_auth: AuthContext) -> None:
        """Test that the stored post is authored by the caller and embeds the author."""
        blog = await service.create_blog(_body(), admin_auth)

        assert blog.author_id == admin_auth.user_id
        assert blog.author is not None
        assert blog.author.name == "Admin User"
        assert blog.author.email == "admin@healthblog.com"

    async def test_defaults(self, service: BlogService, admin_auth: AuthContext) -> None:
        """Test the default cover image and tag trimming."""
        blog = await service.create_blog(
            _body(tags=[" sleep ", "sleep", "rest"]),
            admin_auth,
        )

        assert blog.cover_image == ""
        assert blog.tags == ["sleep", "sleep", "rest"]


class TestListing:
    """Test cases for listing, category and search."""

    async def test_pagination_metadata(
        self,
        service: BlogService,
        admin_auth: AuthContext,
    ) -> None:
        """Test that pages are counted with the ceiling of total over limit."""
        for index in range(5):
            await service.create_blog(_body(f"Post {index}"), admin_auth)

        page = await service.get_all_blogs(BlogFilters(), page=2, limit=2)

        assert [blog.title for blog in page.items] == ["Post 2", "Post 1"]
        assert page.pagination.model_dump() == {"page": 2, "limit": 2, "total": 5, "pages": 3}

    async def test_page_past_the_end(
        self,
        service: BlogService,
        admin_auth: AuthContext,
    ) -> None:
        """Test that a page past the last one is empty but keeps the total."""
        await service.create_blog(_body(), admin_auth)

        page = await service.get_all_blogs(BlogFilters(), page=9, limit=10)

        assert page.items == []
        assert page.pagination.total == 1
        assert page.pagination.pages == 1

    async def test_by_category(self, service: BlogService, admin_auth: AuthContext) -> None:
        """Test listing a single category."""
        await service.create_blog(_body("Greens"), admin_auth)
        await service.create_blog(_body("Run", category="Exercise"), admin_auth)

        page = await service.get_blogs_by_category("Exercise", page=1, limit=10)

        assert [blog.title for blog in page.items] == ["Run"]

    async def test_search(self, service: BlogService, admin_auth: AuthContext) -> None:
        """Test searching title and content."""
        await service.create_blog(_body("Greens", content="Spinach and kale"), admin_auth)
        await service.create_blog(_body("Run", content="Intervals"), admin_auth)

        page = await service.search_blogs("KALE", page=1, limit=10)

        assert [blog.title for blog in page.items] == ["Greens"]
        assert page.pagination.total == 1

    async def test_deleted_author_resolves_to_none(
        self,
        service: BlogService,
        admin: UserDB,
        admin_auth: AuthContext,
    ) -> None:
        """Test that posts outlive their author."""
        await service.create_blog(_body(), admin_auth)
        await service.user_repo.delete_by_id(admin.id)

        page = await service.get_all_blogs(BlogFilters(), page=1, limit=10)

        assert len(page.items) == 1
        assert page.items[0].author is None


class TestGetBlogById:
    """Test cases for BlogService.get_blog_by_id."""

    async def test_with_related(self, service: BlogService, admin_auth: AuthContext) -> None:
        """Test that related posts exclude the post itself."""
        target = await service.create_blog(_body("Target", tags=["sleep"]), admin_auth)
        await service.create_blog(_body("Same category", tags=[]), admin_auth)
        await service.create_blog(
            _body("Shared tag", category="Sleep", tags=["sleep"]),
            admin_auth,
        )
        await service.create_blog(_body("Unrelated", category="Exercise", tags=[]), admin_auth)

        detail = await service.get_blog_by_id(target.id)

        assert detail.blog.id == target.id
        assert [blog.title for blog in detail.related_blogs] == ["Shared tag", "Same category"]

    async def test_missing(self, service: BlogService) -> None:
        """Test that an unknown id is NotFoundError."""
        with pytest.raises(NotFoundError, match="Blog not found"):
            await service.get_blog_by_id(uuid4())


class TestUpdateAndDelete:
    """Test cases for update_blog and delete_blog."""

    async def test_partial_update(self, service: BlogService, admin_auth: AuthContext) -> None:
        """Test that only sent fields change."""
        blog = await service.create_blog(_body(), admin_auth)

        updated = await service.update_blog(blog.id, BlogUpdate(title="New title"))

        assert updated.title == "New title"
        assert updated.content == blog.content
        assert updated.tags == blog.tags
        assert updated.updated_at is not None

    async def test_update_missing(self, service: BlogService) -> None:
        """Test updating an unknown post."""
        with pytest.raises(NotFoundError):
            await service.update_blog(uuid4(), BlogUpdate(title="x"))

    async def test_delete(self, service: BlogService, admin_auth: AuthContext) -> None:
        """Test that a deleted post can no longer be found."""
        blog = await service.create_blog(_body(), admin_auth)

        await service.delete_blog(blog.id)

        with pytest.raises(NotFoundError):
            await service.get_blog_by_id(blog.id)
        with pytest.raises(NotFoundError):
            await service.delete_blog(blog.id)
