# healthblog/middleware/middleware.py
"""
Middleware components for the Health & Wellness Blog API.

Request logging with request-id correlation, and the lifespan handler
that prepares logging and the database on startup and releases the
connection pool on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from healthblog.configs import settings
from healthblog.db import close_db, init_db
from healthblog.monitoring import bind_request_id, clear_context, configure_logging, get_logger
from healthblog.utils.helpers import host

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events."""
    configure_logging()
    logger.info("Starting application", app=app.title, environment=settings.ENVIRONMENT)

    try:
        await init_db()
    except Exception:
        logger.exception("Failed to initialize database")
        raise

    logger.info("Services initialized successfully")

    yield

    logger.info("Shutting down application", app=app.title)
    await close_db()


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing, tagging every log line with a request id."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_request_id(request_id)
        start_time = perf_counter()

        logger.info(
            "Request",
            method=request.method,
            path=request.url.path,
            ip=host(request),
        )
        try:
            response = await call_next(request)
            duration = perf_counter() - start_time
            logger.info(
                "Response",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                duration=f"{duration:.3f}s",
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_context()
