"""Admin dashboard and user/blog management."""

from asyncio import gather
from uuid import UUID

from healthblog.configs.settings import RECENT_ACTIVITY_LIMIT
from healthblog.db.database import SessionFactory
from healthblog.errors import NotFoundError
from healthblog.monitoring import get_logger
from healthblog.repositories import (
    AUTHOR_REFERENCE,
    BaseRepository,
    BlogRepository,
    CategoryRepository,
    SubscriberRepository,
    UserRepository,
)
from healthblog.repositories.filters import Filters
from healthblog.schemas.admin import DashboardResponse, DashboardStats, RecentActivities
from healthblog.schemas.base import Page, Pagination
from healthblog.schemas.blog import BlogResponse
from healthblog.schemas.user import AdminUserResponse, UserResponse
from healthblog.utils.helpers import page_to_skip

logger = get_logger(__name__)

USER_NOT_FOUND = "User not found"


class AdminService:
    """
    Operations behind the admin routes.

    Args:
        user_repo: Users, bound to the request session
        blog_repo: Blogs, bound to the request session
        session_factory: Source of extra sessions for concurrent counts
    """

    def __init__(
        self,
        user_repo: UserRepository,
        blog_repo: BlogRepository,
        session_factory: SessionFactory,
    ) -> None:
        self.user_repo = user_repo
        self.blog_repo = blog_repo
        self.session_factory = session_factory

    async def _count(
        self,
        repository: type[BaseRepository],
        filters: Filters | None = None,
    ) -> int:
        # A session runs one statement at a time, so each count gets its own
        async with self.session_factory() as session:
            return await repository(session).count(filters)

    async def get_dashboard_stats(self) -> DashboardResponse:
        """
        Totals plus the five newest posts (with authors) and regular users.

        The four counts run concurrently.
        """
        total_users, total_blogs, total_subscribers, total_categories = await gather(
            self._count(UserRepository, {"role": "user"}),
            self._count(BlogRepository),
            self._count(SubscriberRepository),
            self._count(CategoryRepository),
        )

        recent_blogs = await self.blog_repo.find_many(limit=RECENT_ACTIVITY_LIMIT)
        recent_users = await self.user_repo.find_many({"role": "user"}, limit=RECENT_ACTIVITY_LIMIT)

        return DashboardResponse(
            stats=DashboardStats(
                total_users=total_users,
                total_blogs=total_blogs,
                total_subscribers=total_subscribers,
                total_categories=total_categories,
            ),
            recent_activities=RecentActivities(
                recent_blogs=[
                    BlogResponse.model_validate(row)
                    for row in await self.blog_repo.populate(recent_blogs, AUTHOR_REFERENCE)
                ],
                recent_users=[UserResponse.model_validate(user) for user in recent_users],
            ),
        )

    async def get_all_users(self, page: int, limit: int) -> Page[AdminUserResponse]:
        """Every user (admins included), newest first, with bookmark counts."""
        users = await self.user_repo.find_many(limit=limit, skip=page_to_skip(page, limit))
        total = await self.user_repo.count()
        counts = await self.user_repo.bookmark_counts(user.id for user in users)

        items = [
            AdminUserResponse.model_validate(
                {**user.model_dump(), "bookmarks_count": counts.get(user.id, 0)},
            )
            for user in users
        ]
        return Page[AdminUserResponse](items=items, pagination=Pagination.build(page, limit, total))

    async def update_user_role(self, user_id: UUID, role: str) -> UserResponse:
        """
        Change a user's role. Tokens already issued keep the old role until they expire.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repo.update_by_id(user_id, {"role": role})
        if not user:
            raise NotFoundError(USER_NOT_FOUND)
        logger.info("User role updated", user_id=str(user_id), role=role)
        return UserResponse.model_validate(user)

    async def delete_user(self, user_id: UUID) -> UserResponse:
        """
        Delete a user and their bookmarks. Their posts stay, with no author.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repo.delete_by_id(user_id)
        if not user:
            raise NotFoundError(USER_NOT_FOUND)
        await self.user_repo.remove_all_bookmarks(user_id)
        logger.info("User deleted", user_id=str(user_id))
        return UserResponse.model_validate(user)

    async def get_all_blogs_for_admin(self, page: int, limit: int) -> Page[BlogResponse]:
        """Every post, newest first, with authors."""
        blogs = await self.blog_repo.find_many(limit=limit, skip=page_to_skip(page, limit))
        total = await self.blog_repo.count()
        rows = await self.blog_repo.populate(blogs, AUTHOR_REFERENCE)
        return Page[BlogResponse](
            items=[BlogResponse.model_validate(row) for row in rows],
            pagination=Pagination.build(page, limit, total),
        )
