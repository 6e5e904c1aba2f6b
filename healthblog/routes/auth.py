# healthblog/routes/auth.py

"""
Authentication Routes.

Summary
-------
  - Register a new account
  - Log in with email and password
  - Get the current caller's profile
"""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from healthblog.auth import AuthDep
from healthblog.dependencies import AuthServiceDep
from healthblog.routes.responses import BAD_REQUEST, UNAUTHORIZED, conflict, error_example
from healthblog.schemas import UserLogin, UserRegister, success_response

router = APIRouter(prefix="/auth", tags=["🔑 Auth"])


@router.post(
    "/register",
    response_class=ORJSONResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "User registered successfully",
                        "data": {
                            "user": {
                                "id": "123e4567-e89b-12d3-a456-426614174000",
                                "name": "Jane Doe",
                                "email": "jane@example.com",
                                "role": "user",
                            },
                            "token": "eyJhbGciOi...",
                        },
                    },
                },
            },
        },
        **BAD_REQUEST,
        **conflict("User already exists with this email"),
    },
    operation_id="auth_register",
)
async def register(body: UserRegister, service: AuthServiceDep) -> ORJSONResponse:
    """
    Register a new user with role ``user``.

    Parameters
    ----------
    body : UserRegister
        Name, email and password (at least 6 characters).
    service : AuthService
        Auth service dependency.

    Returns
    -------
    ORJSONResponse
        Envelope with the new user and an access token.
    """
    result = await service.register(body)
    return success_response("User registered successfully", result, HTTP_201_CREATED)


@router.post(
    "/login",
    response_class=ORJSONResponse,
    summary="Log in",
    responses={
        **BAD_REQUEST,
        401: error_example("Invalid credentials", "Invalid email or password"),
    },
    operation_id="auth_login",
)
async def login(body: UserLogin, service: AuthServiceDep) -> ORJSONResponse:
    """
    Exchange email and password for an access token.

    Unknown email and wrong password give the same 401 response.
    """
    result = await service.login(body.email or "", body.password or "")
    return success_response("Login successful", result)


@router.get(
    "/me",
    response_class=ORJSONResponse,
    summary="Current user profile",
    responses=UNAUTHORIZED,
    operation_id="auth_me",
)
async def me(auth: AuthDep, service: AuthServiceDep) -> ORJSONResponse:
    profile = await service.get_profile(auth)
    return success_response("Profile retrieved successfully", profile)
