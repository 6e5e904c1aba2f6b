from healthblog.repositories.base import BaseRepository, Reference
from healthblog.repositories.blog import AUTHOR_REFERENCE, BlogRepository
from healthblog.repositories.category import CategoryRepository
from healthblog.repositories.subscriber import SubscriberRepository
from healthblog.repositories.user import UserRepository

__all__ = [
    "AUTHOR_REFERENCE",
    "BaseRepository",
    "BlogRepository",
    "CategoryRepository",
    "Reference",
    "SubscriberRepository",
    "UserRepository",
]
