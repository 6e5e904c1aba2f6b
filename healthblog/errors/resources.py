"""Business-rule errors raised by the service layer."""

from starlette.status import HTTP_404_NOT_FOUND, HTTP_409_CONFLICT

from healthblog.errors.base import BaseAppError, create_exception_handler
from healthblog.monitoring import get_logger

logger = get_logger(__name__)


class NotFoundError(BaseAppError):
    """Raised when a looked-up entity does not exist."""

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class ConflictError(BaseAppError):
    """Raised when an entity with the same unique value already exists."""

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(detail, HTTP_409_CONFLICT)


resource_exception_handler = create_exception_handler(logger)
