from pydantic import Field

from healthblog.schemas.base import CamelModel
from healthblog.schemas.blog import BlogResponse
from healthblog.schemas.user import UserResponse


class DashboardStats(CamelModel):
    total_users: int = Field(ge=0, description="Users with role 'user'")
    total_blogs: int = Field(ge=0)
    total_subscribers: int = Field(ge=0)
    total_categories: int = Field(ge=0)


class RecentActivities(CamelModel):
    recent_blogs: list[BlogResponse]
    recent_users: list[UserResponse]


class DashboardResponse(CamelModel):
    """Admin dashboard: totals plus the latest posts and sign-ups."""

    stats: DashboardStats
    recent_activities: RecentActivities


class ServiceInfo(CamelModel):
    """Payload of ``GET /api``."""

    name: str
    version: str
    endpoints: dict[str, str]
