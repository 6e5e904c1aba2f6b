# healthblog/routes/category.py

"""Category Routes: public reads, admin-only writes."""

from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from healthblog.auth import AdminDep
from healthblog.dependencies import CategoryServiceDep
from healthblog.routes.responses import ADMIN_ONLY, BAD_REQUEST, conflict, not_found
from healthblog.schemas import CategoryCreate, CategoryUpdate, success_response

router = APIRouter(prefix="/categories", tags=["🗂️ Categories"])

CATEGORY_NOT_FOUND = not_found("Category not found")


@router.get(
    "",
    response_class=ORJSONResponse,
    summary="List categories",
    operation_id="categories_list",
)
async def list_categories(service: CategoryServiceDep) -> ORJSONResponse:
    categories = await service.get_all_categories()
    return success_response("Categories retrieved successfully", categories)


@router.get(
    "/{category_id}",
    response_class=ORJSONResponse,
    summary="Get category by ID",
    responses=CATEGORY_NOT_FOUND,
    operation_id="categories_get_by_id",
)
async def get_category(category_id: UUID, service: CategoryServiceDep) -> ORJSONResponse:
    category = await service.get_category_by_id(category_id)
    return success_response("Category retrieved successfully", category)


@router.post(
    "",
    response_class=ORJSONResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a category",
    responses={**BAD_REQUEST, **ADMIN_ONLY, **conflict("Category already exists")},
    operation_id="categories_create",
)
async def create_category(
    body: CategoryCreate,
    admin: AdminDep,
    service: CategoryServiceDep,
) -> ORJSONResponse:
    category = await service.create_category(body)
    return success_response("Category created successfully", category, HTTP_201_CREATED)


@router.put(
    "/{category_id}",
    response_class=ORJSONResponse,
    summary="Update a category",
    responses={
        **BAD_REQUEST,
        **ADMIN_ONLY,
        **CATEGORY_NOT_FOUND,
        **conflict("Category already exists"),
    },
    operation_id="categories_update",
)
async def update_category(
    category_id: UUID,
    body: CategoryUpdate,
    admin: AdminDep,
    service: CategoryServiceDep,
) -> ORJSONResponse:
    category = await service.update_category(category_id, body)
    return success_response("Category updated successfully", category)


@router.delete(
    "/{category_id}",
    response_class=ORJSONResponse,
    summary="Delete a category",
    responses={**ADMIN_ONLY, **CATEGORY_NOT_FOUND},
    operation_id="categories_delete",
)
async def delete_category(
    category_id: UUID,
    admin: AdminDep,
    service: CategoryServiceDep,
) -> ORJSONResponse:
    await service.delete_category(category_id)
    return success_response("Category deleted successfully")
