"""Blog post service."""

from collections.abc import Iterable, Sequence
from uuid import UUID

from healthblog.auth.permissions import AuthContext
from healthblog.configs.settings import RELATED_BLOGS_LIMIT
from healthblog.errors import NotFoundError
from healthblog.models import BlogDB
from healthblog.monitoring import get_logger
from healthblog.repositories import BlogRepository, UserRepository
from healthblog.schemas.base import Page, Pagination
from healthblog.schemas.blog import (
    AuthorSummary,
    BlogCreate,
    BlogDetail,
    BlogFilters,
    BlogResponse,
    BlogUpdate,
)
from healthblog.utils.helpers import page_to_skip

logger = get_logger(__name__)

BLOG_NOT_FOUND = "Blog not found"


class BlogService:
    """Create, list, look up, update and delete blog posts."""

    def __init__(self, blog_repo: BlogRepository, user_repo: UserRepository) -> None:
        self.blog_repo = blog_repo
        self.user_repo = user_repo

    async def resolve_authors(self, author_ids: Iterable[UUID]) -> dict[UUID, AuthorSummary]:
        """
        Look up author name and email for many posts at once.

        Args:
            author_ids: Author IDs (duplicates allowed)

        Returns:
            dict[UUID, AuthorSummary]: Authors keyed by ID; deleted users are absent
        """
        users = await self.user_repo.find_by_ids(author_ids)
        return {
            user_id: AuthorSummary(name=user.name, email=user.email)
            for user_id, user in users.items()
        }

    async def with_authors(self, blogs: Sequence[BlogDB]) -> list[BlogResponse]:
        """Attach author details to each post, preserving order."""
        authors = await self.resolve_authors(blog.author_id for blog in blogs)
        return [
            BlogResponse.model_validate(
                {**blog.model_dump(), "author": authors.get(blog.author_id)},
            )
            for blog in blogs
        ]

    async def create_blog(self, data: BlogCreate, auth: AuthContext) -> BlogResponse:
        """
        Create a post authored by the caller.

        Args:
            data: Validated post body
            auth: Caller identity (becomes the author)

        Returns:
            BlogResponse: The stored post with its author
        """
        blog = await self.blog_repo.create({**data.model_dump(), "author_id": auth.user_id})
        logger.info("Blog created", blog_id=str(blog.id), author_id=str(auth.user_id))
        [response] = await self.with_authors([blog])
        return response

    async def get_all_blogs(
        self,
        filters: BlogFilters,
        page: int,
        limit: int,
    ) -> Page[BlogResponse]:
        """
        List posts matching all given filters, newest first.

        Args:
            filters: Category, tags and search filters
            page: 1-based page number
            limit: Page size

        Returns:
            Page[BlogResponse]: The page and its pagination metadata
        """
        blogs = await self.blog_repo.find_with_filters(
            filters,
            limit=limit,
            skip=page_to_skip(page, limit),
        )
        total = await self.blog_repo.count_with_filters(filters)
        return Page[BlogResponse](
            items=await self.with_authors(blogs),
            pagination=Pagination.build(page, limit, total),
        )

    async def get_blogs_by_category(
        self,
        category: str,
        page: int,
        limit: int,
    ) -> Page[BlogResponse]:
        return await self.get_all_blogs(BlogFilters(category=category), page, limit)

    async def search_blogs(self, query: str, page: int, limit: int) -> Page[BlogResponse]:
        return await self.get_all_blogs(BlogFilters(search=query), page, limit)

    async def get_blog_by_id(self, blog_id: UUID) -> BlogDetail:
        """
        Look up a post together with up to five related posts.

        Related posts share the category or at least one tag, and never
        include the post itself.

        Raises:
            NotFoundError: If the post does not exist
        """
        blog = await self.blog_repo.find_by_id(blog_id)
        if not blog:
            raise NotFoundError(BLOG_NOT_FOUND)

        related = await self.blog_repo.find_related(blog, limit=RELATED_BLOGS_LIMIT)
        [detail, *related_blogs] = await self.with_authors([blog, *related])
        return BlogDetail(blog=detail, related_blogs=related_blogs)

    async def update_blog(self, blog_id: UUID, data: BlogUpdate) -> BlogResponse:
        """
        Apply a partial update to a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        blog = await self.blog_repo.update_by_id(
            blog_id,
            data.model_dump(exclude_unset=True),
        )
        if not blog:
            raise NotFoundError(BLOG_NOT_FOUND)
        logger.info("Blog updated", blog_id=str(blog_id))
        [response] = await self.with_authors([blog])
        return response

    async def delete_blog(self, blog_id: UUID) -> BlogResponse:
        """
        Delete a post. Bookmarks pointing at it are left in place and skipped on read.

        Raises:
            NotFoundError: If the post does not exist
        """
        blog = await self.blog_repo.delete_by_id(blog_id)
        if not blog:
            raise NotFoundError(BLOG_NOT_FOUND)
        logger.info("Blog deleted", blog_id=str(blog_id))
        return BlogResponse.model_validate(blog)
