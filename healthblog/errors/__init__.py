from healthblog.errors.auth import (
    INVALID_TOKEN_MESSAGE,
    TOKEN_REQUIRED_MESSAGE,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    UnauthorizedError,
    auth_exception_handler,
)
from healthblog.errors.base import (
    BaseAppError,
    create_exception_handler,
    create_unhandled_exception_handler,
    error_response,
)
from healthblog.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    database_exception_handler,
)
from healthblog.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from healthblog.errors.resources import ConflictError, NotFoundError, resource_exception_handler
from healthblog.errors.validation import (
    ValidationError,
    app_validation_exception_handler,
    format_validation_errors,
    http_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "INVALID_TOKEN_MESSAGE",
    "TOKEN_REQUIRED_MESSAGE",
    "BaseAppError",
    "ConflictError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "NotFoundError",
    "PasswordHashingError",
    "TokenExpiredError",
    "UnauthorizedError",
    "ValidationError",
    "app_validation_exception_handler",
    "auth_exception_handler",
    "create_exception_handler",
    "create_unhandled_exception_handler",
    "database_exception_handler",
    "error_response",
    "format_validation_errors",
    "http_exception_handler",
    "password_hashing_exception_handler",
    "resource_exception_handler",
    "validation_exception_handler",
]
