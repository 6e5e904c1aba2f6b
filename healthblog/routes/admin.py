# healthblog/routes/admin.py

"""
Admin Routes.

Every endpoint requires an admin token.

Summary
-------
  - Dashboard statistics and recent activity
  - List users, change a user's role, delete a user
  - List all blogs
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from healthblog.auth import require_admin
from healthblog.dependencies import AdminServiceDep, PageQueryDep
from healthblog.routes.responses import ADMIN_ONLY, BAD_REQUEST, not_found
from healthblog.schemas import RoleUpdate, success_response

router = APIRouter(
    prefix="/admin",
    tags=["🛡️ Admin"],
    dependencies=[Depends(require_admin)],
    responses=ADMIN_ONLY,
)

USER_NOT_FOUND = not_found("User not found")


@router.get(
    "/dashboard",
    response_class=ORJSONResponse,
    summary="Dashboard statistics",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "Dashboard stats retrieved successfully",
                        "data": {
                            "stats": {
                                "totalUsers": 12,
                                "totalBlogs": 30,
                                "totalSubscribers": 45,
                                "totalCategories": 6,
                            },
                            "recentActivities": {"recentBlogs": [], "recentUsers": []},
                        },
                    },
                },
            },
        },
    },
    operation_id="admin_dashboard",
)
async def dashboard(service: AdminServiceDep) -> ORJSONResponse:
    """
    Get dashboard statistics.

    Returns
    -------
    ORJSONResponse
        Totals of regular users, blogs, subscribers and categories, plus
        the five newest blogs and regular users.
    """
    stats = await service.get_dashboard_stats()
    return success_response("Dashboard stats retrieved successfully", stats)


@router.get(
    "/users",
    response_class=ORJSONResponse,
    summary="List users",
    operation_id="admin_users",
)
async def list_users(paging: PageQueryDep, service: AdminServiceDep) -> ORJSONResponse:
    users = await service.get_all_users(paging.page, paging.limit)
    return success_response("Users retrieved successfully", users)


@router.put(
    "/users/{user_id}/role",
    response_class=ORJSONResponse,
    summary="Change a user's role",
    responses={**BAD_REQUEST, **USER_NOT_FOUND},
    operation_id="admin_update_user_role",
)
async def update_user_role(
    user_id: UUID,
    body: RoleUpdate,
    service: AdminServiceDep,
) -> ORJSONResponse:
    user = await service.update_user_role(user_id, body.role)
    return success_response("User role updated successfully", user)


@router.delete(
    "/users/{user_id}",
    response_class=ORJSONResponse,
    summary="Delete a user",
    responses=USER_NOT_FOUND,
    operation_id="admin_delete_user",
)
async def delete_user(user_id: UUID, service: AdminServiceDep) -> ORJSONResponse:
    await service.delete_user(user_id)
    return success_response("User deleted successfully")


@router.get(
    "/blogs",
    response_class=ORJSONResponse,
    summary="List all blogs",
    operation_id="admin_blogs",
)
async def list_blogs(paging: PageQueryDep, service: AdminServiceDep) -> ORJSONResponse:
    blogs = await service.get_all_blogs_for_admin(paging.page, paging.limit)
    return success_response("Blogs retrieved successfully", blogs)
