# healthblog/routes/blog.py

"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs (category, tags and search filters, paginated)
  - Search blogs
  - List blogs by category
  - Get blog by id (with related blogs)
  - Create, update and delete blogs (admin only)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from healthblog.auth import AdminDep
from healthblog.dependencies import BlogFiltersDep, BlogServiceDep, PageQueryDep
from healthblog.errors import ValidationError
from healthblog.routes.responses import ADMIN_ONLY, BAD_REQUEST, not_found
from healthblog.schemas import BlogCreate, BlogUpdate, success_response

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])

BLOGS_RETRIEVED = "Blogs retrieved successfully"


@router.get(
    "",
    response_class=ORJSONResponse,
    summary="List blogs",
    description="List blogs newest first. Filters are combined; `tags` matches any tag.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": BLOGS_RETRIEVED,
                        "data": {
                            "items": [],
                            "pagination": {"page": 1, "limit": 10, "total": 0, "pages": 0},
                        },
                    },
                },
            },
        },
        **BAD_REQUEST,
    },
    operation_id="blogs_list",
)
async def list_blogs(
    filters: BlogFiltersDep,
    paging: PageQueryDep,
    service: BlogServiceDep,
) -> ORJSONResponse:
    """
    List blogs with optional filters.

    Parameters
    ----------
    filters : BlogFilters
        ``category`` (exact), ``tags`` (comma list, any match) and
        ``search`` (title or content, case-insensitive).
    paging : PageQuery
        ``page`` and ``limit``.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    ORJSONResponse
        Envelope with ``items`` and ``pagination``.
    """
    result = await service.get_all_blogs(filters, paging.page, paging.limit)
    return success_response(BLOGS_RETRIEVED, result)


@router.get(
    "/search",
    response_class=ORJSONResponse,
    summary="Search blogs",
    responses=BAD_REQUEST,
    operation_id="blogs_search",
)
async def search_blogs(
    paging: PageQueryDep,
    service: BlogServiceDep,
    q: Annotated[str | None, Query(description="Text to find in title or content")] = None,
) -> ORJSONResponse:
    if not q or not q.strip():
        raise ValidationError("Search query is required")
    result = await service.search_blogs(q, paging.page, paging.limit)
    return success_response("Search results retrieved successfully", result)


@router.get(
    "/category/{category}",
    response_class=ORJSONResponse,
    summary="List blogs in a category",
    operation_id="blogs_by_category",
)
async def blogs_by_category(
    category: str,
    paging: PageQueryDep,
    service: BlogServiceDep,
) -> ORJSONResponse:
    result = await service.get_blogs_by_category(category, paging.page, paging.limit)
    return success_response(BLOGS_RETRIEVED, result)


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    summary="Get blog by ID",
    description="Retrieve a blog with its author and up to five related blogs.",
    responses=not_found("Blog not found"),
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: UUID, service: BlogServiceDep) -> ORJSONResponse:
    result = await service.get_blog_by_id(blog_id)
    return success_response("Blog retrieved successfully", result)


@router.post(
    "",
    response_class=ORJSONResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a blog",
    responses={**BAD_REQUEST, **ADMIN_ONLY},
    operation_id="blogs_create",
)
async def create_blog(
    body: BlogCreate,
    admin: AdminDep,
    service: BlogServiceDep,
) -> ORJSONResponse:
    """
    Create a new blog post authored by the calling admin.

    Parameters
    ----------
    body : BlogCreate
        Title, content and category are required.
    admin : AuthContext
        Authenticated admin (becomes the author).
    service : BlogService
        Blog service dependency.

    Returns
    -------
    ORJSONResponse
        Envelope with the created blog, status 201.
    """
    blog = await service.create_blog(body, admin)
    return success_response("Blog created successfully", blog, HTTP_201_CREATED)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    summary="Update a blog",
    responses={**BAD_REQUEST, **ADMIN_ONLY, **not_found("Blog not found")},
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: UUID,
    body: BlogUpdate,
    admin: AdminDep,
    service: BlogServiceDep,
) -> ORJSONResponse:
    blog = await service.update_blog(blog_id, body)
    return success_response("Blog updated successfully", blog)


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    summary="Delete a blog",
    responses={**ADMIN_ONLY, **not_found("Blog not found")},
    operation_id="blogs_delete",
)
async def delete_blog(blog_id: UUID, admin: AdminDep, service: BlogServiceDep) -> ORJSONResponse:
    await service.delete_blog(blog_id)
    return success_response("Blog deleted successfully")
