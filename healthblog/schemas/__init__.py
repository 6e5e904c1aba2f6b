from healthblog.schemas.admin import (
    DashboardResponse,
    DashboardStats,
    RecentActivities,
    ServiceInfo,
)
from healthblog.schemas.auth import AuthResult, TokenData, UserLogin, UserRegister
from healthblog.schemas.base import CamelModel, Page, Pagination, dump, success_response
from healthblog.schemas.blog import (
    AuthorSummary,
    BlogCreate,
    BlogDetail,
    BlogFilters,
    BlogResponse,
    BlogUpdate,
)
from healthblog.schemas.bookmark import BookmarkRequest
from healthblog.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from healthblog.schemas.newsletter import NewsletterRequest, SubscriberResponse
from healthblog.schemas.user import AdminUserResponse, RoleUpdate, UserResponse

__all__ = [
    "AdminUserResponse",
    "AuthResult",
    "AuthorSummary",
    "BlogCreate",
    "BlogDetail",
    "BlogFilters",
    "BlogResponse",
    "BlogUpdate",
    "BookmarkRequest",
    "CamelModel",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "DashboardResponse",
    "DashboardStats",
    "NewsletterRequest",
    "Page",
    "Pagination",
    "RecentActivities",
    "RoleUpdate",
    "ServiceInfo",
    "SubscriberResponse",
    "TokenData",
    "UserLogin",
    "UserRegister",
    "UserResponse",
    "dump",
    "success_response",
]
