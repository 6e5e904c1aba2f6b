# healthblog/main.py

"""Health & Wellness Blog API: application factory, error handlers and service routes."""

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from healthblog.configs import settings
from healthblog.errors import (
    BaseAppError,
    DatabaseError,
    ForbiddenError,
    PasswordHashingError,
    UnauthorizedError,
    ValidationError,
    app_validation_exception_handler,
    auth_exception_handler,
    create_unhandled_exception_handler,
    database_exception_handler,
    http_exception_handler,
    password_hashing_exception_handler,
    resource_exception_handler,
    validation_exception_handler,
)
from healthblog.middleware import LoggingMiddleware, lifespan
from healthblog.monitoring import get_logger
from healthblog.routes import (
    admin_router,
    auth_router,
    blog_router,
    bookmark_router,
    category_router,
    newsletter_router,
)
from healthblog.schemas import ServiceInfo, success_response
from healthblog.utils.helpers import today_str

logger = get_logger(__name__)

API_PREFIX = "/api"

app = FastAPI(
    title=settings.APP_NAME,
    description="REST API for a health and wellness blogging platform",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

app.add_middleware(LoggingMiddleware)

api_router = APIRouter(prefix=API_PREFIX)

routes = [
    auth_router,
    blog_router,
    bookmark_router,
    category_router,
    newsletter_router,
    admin_router,
]

_ = [api_router.include_router(router) for router in routes]

# Starlette picks the handler of the closest class in the exception's MRO
errors = [
    (UnauthorizedError, auth_exception_handler),
    (ForbiddenError, auth_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (ValidationError, app_validation_exception_handler),
    (BaseAppError, resource_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (StarletteHTTPException, http_exception_handler),
    (Exception, create_unhandled_exception_handler(logger)),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "Server is running",
                        "data": {"status": "ok", "version": "1.0.0", "timestamp": "2025-01-01"},
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check() -> ORJSONResponse:
    """
    Health check endpoint.

    Returns
    -------
    ORJSONResponse
        Liveness envelope with the API version and the server time.
    """
    return success_response(
        "Server is running",
        {"status": "ok", "version": app.version, "timestamp": today_str()},
    )


@api_router.get(
    "",
    tags=["🏠 Root"],
    summary="API information",
    response_class=ORJSONResponse,
    operation_id="api_info",
)
async def api_info() -> ORJSONResponse:
    """List the API's resource groups."""
    info = ServiceInfo(
        name=app.title,
        version=app.version,
        endpoints={
            "auth": f"{API_PREFIX}/auth",
            "blogs": f"{API_PREFIX}/blogs",
            "bookmarks": f"{API_PREFIX}/bookmarks",
            "categories": f"{API_PREFIX}/categories",
            "newsletter": f"{API_PREFIX}/newsletter",
            "admin": f"{API_PREFIX}/admin",
        },
    )
    return success_response("Health & Wellness Blog API", info)


app.include_router(api_router)
