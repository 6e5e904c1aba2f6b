"""Blog repository for database operations."""

from sqlalchemy import ColumnElement, or_

from healthblog.configs.settings import RELATED_BLOGS_LIMIT
from healthblog.models.blog import BlogDB
from healthblog.models.user import UserDB
from healthblog.repositories.base import BaseRepository, Reference
from healthblog.repositories.filters import (
    exclude_id_clause,
    search_clause,
    tags_overlap_clause,
)
from healthblog.schemas.blog import BlogCreate, BlogFilters, BlogUpdate

AUTHOR_REFERENCE = Reference(
    field="author_id",
    model=UserDB,
    target="author",
    fields=("name", "email"),
)


def blog_filter_conditions(filters: BlogFilters) -> list[ColumnElement[bool]]:
    """
    Build the conditions for a blog listing.

    Category is an exact match, tags match on any overlap and search is a
    case-insensitive substring of the title or the content. All given
    filters must hold.
    """
    conditions: list[ColumnElement[bool]] = []
    if filters.category:
        conditions.append(BlogDB.category == filters.category)
    if filters.tags:
        conditions.append(tags_overlap_clause(BlogDB.tags, filters.tags))
    if filters.search:
        conditions.append(search_clause((BlogDB.title, BlogDB.content), filters.search))
    return conditions


class BlogRepository(BaseRepository[BlogDB, BlogCreate, BlogUpdate]):
    """Repository for blog posts."""

    model = BlogDB

    async def find_with_filters(
        self,
        filters: BlogFilters,
        *,
        limit: int,
        skip: int = 0,
    ) -> list[BlogDB]:
        """
        Get one page of blogs matching ``filters``, newest first.

        Args:
            filters: Category/tags/search filters
            limit: Page size
            skip: Number of matches to skip

        Returns:
            list[BlogDB]: Matching blogs
        """
        return await self.find_many(where=blog_filter_conditions(filters), limit=limit, skip=skip)

    async def count_with_filters(self, filters: BlogFilters) -> int:
        """Count every blog matching ``filters`` (ignores pagination)."""
        return await self.count(where=blog_filter_conditions(filters))

    async def find_related(
        self,
        blog: BlogDB,
        limit: int = RELATED_BLOGS_LIMIT,
    ) -> list[BlogDB]:
        """
        Other posts sharing the category or at least one tag, newest first.

        Args:
            blog: The post to find relatives of (never included)
            limit: Maximum number of related posts

        Returns:
            list[BlogDB]: Related posts
        """
        related = or_(
            BlogDB.category == blog.category,
            tags_overlap_clause(BlogDB.tags, blog.tags),
        )
        return await self.find_many(
            where=(exclude_id_clause(BlogDB, blog.id), related),
            limit=limit,
        )
