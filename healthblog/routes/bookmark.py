# healthblog/routes/bookmark.py

"""Bookmark Routes: the caller's saved blogs."""

from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from healthblog.auth import AuthDep
from healthblog.dependencies import BookmarkServiceDep
from healthblog.routes.responses import BAD_REQUEST, UNAUTHORIZED, not_found
from healthblog.schemas import BookmarkRequest, success_response

router = APIRouter(prefix="/bookmarks", tags=["🔖 Bookmarks"])


@router.get(
    "",
    response_class=ORJSONResponse,
    summary="List my bookmarks",
    responses=UNAUTHORIZED,
    operation_id="bookmarks_list",
)
async def list_bookmarks(auth: AuthDep, service: BookmarkServiceDep) -> ORJSONResponse:
    bookmarks = await service.get_user_bookmarks(auth)
    return success_response("Bookmarks retrieved successfully", bookmarks)


@router.post(
    "",
    response_class=ORJSONResponse,
    summary="Bookmark a blog",
    description="Bookmarking an already bookmarked blog succeeds without duplicating it.",
    responses={**BAD_REQUEST, **UNAUTHORIZED, **not_found("Blog not found")},
    operation_id="bookmarks_add",
)
async def add_bookmark(
    body: BookmarkRequest,
    auth: AuthDep,
    service: BookmarkServiceDep,
) -> ORJSONResponse:
    await service.add_bookmark(auth, body.blog_id)
    return success_response("Blog bookmarked successfully")


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    summary="Remove a bookmark",
    description="Removing a bookmark that does not exist also succeeds.",
    responses=UNAUTHORIZED,
    operation_id="bookmarks_remove",
)
async def remove_bookmark(
    blog_id: UUID,
    auth: AuthDep,
    service: BookmarkServiceDep,
) -> ORJSONResponse:
    await service.remove_bookmark(auth, blog_id)
    return success_response("Bookmark removed successfully")
