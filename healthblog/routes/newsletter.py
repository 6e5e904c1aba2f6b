# healthblog/routes/newsletter.py

"""Newsletter Routes."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from healthblog.auth import AdminDep
from healthblog.dependencies import NewsletterServiceDep
from healthblog.routes.responses import ADMIN_ONLY, BAD_REQUEST, conflict, not_found
from healthblog.schemas import NewsletterRequest, success_response

router = APIRouter(prefix="/newsletter", tags=["📰 Newsletter"])


@router.post(
    "/subscribe",
    response_class=ORJSONResponse,
    status_code=HTTP_201_CREATED,
    summary="Subscribe to the newsletter",
    responses={**BAD_REQUEST, **conflict("Email already subscribed to newsletter")},
    operation_id="newsletter_subscribe",
)
async def subscribe(body: NewsletterRequest, service: NewsletterServiceDep) -> ORJSONResponse:
    await service.subscribe(body.email)
    return success_response("Successfully subscribed to newsletter", status_code=HTTP_201_CREATED)


@router.post(
    "/unsubscribe",
    response_class=ORJSONResponse,
    summary="Unsubscribe from the newsletter",
    responses={**BAD_REQUEST, **not_found("Email not found in subscribers")},
    operation_id="newsletter_unsubscribe",
)
async def unsubscribe(body: NewsletterRequest, service: NewsletterServiceDep) -> ORJSONResponse:
    message = await service.unsubscribe(body.email)
    return success_response(message)


@router.get(
    "/subscribers",
    response_class=ORJSONResponse,
    summary="List subscribers",
    responses=ADMIN_ONLY,
    operation_id="newsletter_subscribers",
)
async def list_subscribers(admin: AdminDep, service: NewsletterServiceDep) -> ORJSONResponse:
    subscribers = await service.get_all_subscribers()
    return success_response("Subscribers retrieved successfully", subscribers)
