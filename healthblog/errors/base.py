from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from structlog.stdlib import BoundLogger

from healthblog.configs import DEFAULT_ERROR_MESSAGE, settings
from healthblog.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def error_response(
    message: str,
    status_code: int,
    error: str | None = None,
) -> ORJSONResponse:
    """
    Build the failure envelope ``{"success": false, "message": ..., "error"?: ...}``.

    Args:
        message: Client-facing message
        status_code: HTTP status code
        error: Optional diagnostic detail

    Returns:
        ORJSONResponse: Envelope response
    """
    content: dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    return ORJSONResponse(content=content, status_code=status_code)


def create_exception_handler(
    logger: BoundLogger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", DEFAULT_ERROR_MESSAGE)

        logger.warning(
            detail,
            ip=host(request),
            endpoint=request.url.path,
            status_code=status_code,
        )
        return error_response(detail, status_code)

    return handler


def create_unhandled_exception_handler(
    logger: BoundLogger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create the catch-all handler for exceptions nothing else claims.

    The raw exception text is only exposed outside production.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        logger.exception(
            "Unhandled exception",
            ip=host(request),
            endpoint=request.url.path,
            exc_info=exc,
        )
        error = None if settings.is_production else str(exc)
        return error_response(DEFAULT_ERROR_MESSAGE, HTTP_500_INTERNAL_SERVER_ERROR, error)

    return handler
