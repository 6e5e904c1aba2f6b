from healthblog.models.blog import BlogDB
from healthblog.models.bookmark import BookmarkDB
from healthblog.models.category import CategoryDB
from healthblog.models.subscriber import SubscriberDB
from healthblog.models.user import USER_ROLES, UserDB, UserRole

__all__ = [
    "USER_ROLES",
    "BlogDB",
    "BookmarkDB",
    "CategoryDB",
    "SubscriberDB",
    "UserDB",
    "UserRole",
]
