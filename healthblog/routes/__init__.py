from healthblog.routes.admin import router as admin_router
from healthblog.routes.auth import router as auth_router
from healthblog.routes.blog import router as blog_router
from healthblog.routes.bookmark import router as bookmark_router
from healthblog.routes.category import router as category_router
from healthblog.routes.newsletter import router as newsletter_router

__all__ = [
    "admin_router",
    "auth_router",
    "blog_router",
    "bookmark_router",
    "category_router",
    "newsletter_router",
]
