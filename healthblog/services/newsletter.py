"""Newsletter subscription service."""

from healthblog.errors import ConflictError, NotFoundError
from healthblog.monitoring import get_logger
from healthblog.repositories import SubscriberRepository
from healthblog.schemas.newsletter import SubscriberResponse
from healthblog.utils.helpers import normalize_email

logger = get_logger(__name__)

UNSUBSCRIBED_MESSAGE = "Successfully unsubscribed"


class NewsletterService:
    def __init__(self, subscriber_repo: SubscriberRepository) -> None:
        self.subscriber_repo = subscriber_repo

    async def subscribe(self, email: str) -> SubscriberResponse:
        """
        Add an email to the subscriber list.

        Raises:
            ConflictError: If the email is already subscribed
        """
        email = normalize_email(email)
        if await self.subscriber_repo.find_by_email(email):
            raise ConflictError("Email already subscribed to newsletter")

        subscriber = await self.subscriber_repo.create({"email": email})
        logger.info("Newsletter subscription", subscriber_id=str(subscriber.id))
        return SubscriberResponse.model_validate(subscriber)

    async def unsubscribe(self, email: str) -> str:
        """
        Remove an email from the subscriber list.

        Returns:
            str: Confirmation message

        Raises:
            NotFoundError: If the email is not subscribed
        """
        subscriber = await self.subscriber_repo.find_by_email(email)
        if not subscriber:
            raise NotFoundError("Email not found in subscribers")

        await self.subscriber_repo.delete_by_id(subscriber.id)
        logger.info("Newsletter unsubscription", subscriber_id=str(subscriber.id))
        return UNSUBSCRIBED_MESSAGE

    async def get_all_subscribers(self) -> list[SubscriberResponse]:
        """Every subscriber, most recent first."""
        subscribers = await self.subscriber_repo.find_many()
        return [SubscriberResponse.model_validate(subscriber) for subscriber in subscribers]
