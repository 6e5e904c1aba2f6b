"""Bookmark service: a user's saved posts."""

from uuid import UUID

from healthblog.auth.permissions import AuthContext
from healthblog.errors import NotFoundError
from healthblog.monitoring import get_logger
from healthblog.repositories import BlogRepository, UserRepository
from healthblog.schemas.blog import BlogResponse
from healthblog.services.blog import BLOG_NOT_FOUND, BlogService

logger = get_logger(__name__)


class BookmarkService:
    def __init__(self, user_repo: UserRepository, blog_repo: BlogRepository) -> None:
        self.user_repo = user_repo
        self.blog_repo = blog_repo

    async def add_bookmark(self, auth: AuthContext, blog_id: UUID) -> None:
        """
        Bookmark a post for the caller. Bookmarking twice keeps one bookmark.

        Raises:
            NotFoundError: If the post does not exist
        """
        if not await self.blog_repo.exists(blog_id):
            raise NotFoundError(BLOG_NOT_FOUND)

        if await self.user_repo.add_bookmark(auth.user_id, blog_id):
            logger.info("Bookmark added", user_id=str(auth.user_id), blog_id=str(blog_id))

    async def remove_bookmark(self, auth: AuthContext, blog_id: UUID) -> None:
        """Remove a bookmark; removing one that does not exist is not an error."""
        if await self.user_repo.remove_bookmark(auth.user_id, blog_id):
            logger.info("Bookmark removed", user_id=str(auth.user_id), blog_id=str(blog_id))

    async def get_user_bookmarks(self, auth: AuthContext) -> list[BlogResponse]:
        """
        The caller's bookmarked posts, most recently bookmarked first.

        Bookmarks of posts deleted since are skipped.
        """
        blog_ids = await self.user_repo.bookmarked_blog_ids(auth.user_id)
        blogs = await self.blog_repo.find_by_ids(blog_ids)
        existing = [blogs[blog_id] for blog_id in blog_ids if blog_id in blogs]
        return await BlogService(self.blog_repo, self.user_repo).with_authors(existing)
