from pydantic import BaseModel

from healthblog.models.subscriber import SubscriberDB
from healthblog.repositories.base import BaseRepository
from healthblog.schemas.newsletter import NewsletterRequest
from healthblog.utils.helpers import normalize_email


class SubscriberRepository(BaseRepository[SubscriberDB, NewsletterRequest, BaseModel]):
    """Repository for newsletter subscribers."""

    model = SubscriberDB
    sort_field = "subscribed_on"

    async def find_by_email(self, email: str) -> SubscriberDB | None:
        return await self.find_one({"email": normalize_email(email)})
