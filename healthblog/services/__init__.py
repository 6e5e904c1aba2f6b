from healthblog.services.admin import AdminService
from healthblog.services.auth import AuthService
from healthblog.services.blog import BlogService
from healthblog.services.bookmark import BookmarkService
from healthblog.services.category import CategoryService
from healthblog.services.newsletter import NewsletterService

__all__ = [
    "AdminService",
    "AuthService",
    "BlogService",
    "BookmarkService",
    "CategoryService",
    "NewsletterService",
]
