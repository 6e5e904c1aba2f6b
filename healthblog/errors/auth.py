"""Authentication and authorization errors."""

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from healthblog.errors.base import BaseAppError, create_exception_handler
from healthblog.monitoring import get_logger

logger = get_logger(__name__)

TOKEN_REQUIRED_MESSAGE = "Access token required"
INVALID_TOKEN_MESSAGE = "Invalid or expired token"


class UnauthorizedError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(self, detail: str = "Authentication failed") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


class InvalidTokenError(UnauthorizedError):
    """Raised when a token is malformed, tampered with or carries bad claims."""

    def __init__(self, detail: str = INVALID_TOKEN_MESSAGE) -> None:
        super().__init__(detail)


class TokenExpiredError(InvalidTokenError):
    """Raised when a token is past its expiry."""

    def __init__(self, detail: str = INVALID_TOKEN_MESSAGE) -> None:
        super().__init__(detail)


class InvalidCredentialsError(UnauthorizedError):
    """Raised when credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class ForbiddenError(BaseAppError):
    """Raised when the caller lacks the required role."""

    def __init__(self, detail: str = "Admin access required") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


auth_exception_handler = create_exception_handler(logger)
