"""Validation error handling for FastAPI."""

from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic_core import ErrorDetails
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from healthblog.errors.base import BaseAppError, create_exception_handler, error_response
from healthblog.monitoring import get_logger
from healthblog.utils.helpers import host

logger = get_logger(__name__)


class ValidationError(BaseAppError):
    """Raised when request input breaks a business rule."""

    def __init__(self, detail: str = "Validation Error") -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


def _format_error(error: ErrorDetails) -> str:
    # Custom validators raise with the client message already written
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])

    field = ".".join(str(loc) for loc in error.get("loc", ())[1:])
    message = error.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


def format_validation_errors(errors: list[ErrorDetails]) -> str:
    """
    Join validation errors into a single client message.

    Args:
        errors: Errors as reported by pydantic

    Returns:
        str: Messages joined with ``", "``
    """
    return ", ".join(_format_error(error) for error in errors)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors as 400 envelopes.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with the joined validation messages.
    """
    exec_error = cast(RequestValidationError, exc)
    message = format_validation_errors(list(exec_error.errors()))

    logger.warning(
        "Validation error",
        ip=host(request),
        endpoint=request.url.path,
        errors=message,
    )
    return error_response(message, HTTP_400_BAD_REQUEST)


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """Render framework HTTP errors (unknown route, wrong method) as envelopes."""
    http_error = cast(StarletteHTTPException, exc)
    if http_error.status_code == HTTP_404_NOT_FOUND:
        message = "Route not found"
    else:
        message = str(http_error.detail)
    logger.info(message, ip=host(request), endpoint=request.url.path)
    return error_response(message, http_error.status_code)


app_validation_exception_handler = create_exception_handler(logger)
