"""Authentication and role checks as FastAPI dependencies."""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from healthblog.errors import (
    INVALID_TOKEN_MESSAGE,
    TOKEN_REQUIRED_MESSAGE,
    ForbiddenError,
    InvalidTokenError,
    UnauthorizedError,
)
from healthblog.managers.token_manager import decode_access_token
from healthblog.monitoring import get_logger

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="JWT access token")


@dataclass(frozen=True)
class AuthContext:
    """
    Identity of the caller, taken from a verified token.

    Services trust this value as given: the token has already been checked
    and the user is not re-loaded from the store.
    """

    user_id: UUID
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


async def get_auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> AuthContext:
    """
    Dependency that authenticates the request from its bearer token.

    Parameters
    ----------
    credentials : HTTPAuthorizationCredentials | None
        Parsed ``Authorization: Bearer <token>`` header, if present.

    Returns
    -------
    AuthContext
        The caller's identity.

    Raises
    ------
    UnauthorizedError
        If the token is missing, invalid or expired.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError(TOKEN_REQUIRED_MESSAGE)

    try:
        token_data = decode_access_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.info("Rejected access token", reason=type(e).__name__)
        raise UnauthorizedError(INVALID_TOKEN_MESSAGE) from e

    return AuthContext(
        user_id=token_data.user_id,
        email=token_data.email,
        role=token_data.role,
    )


AuthDep = Annotated[AuthContext, Depends(get_auth_context)]


async def require_admin(auth: AuthDep) -> AuthContext:
    """
    Dependency that requires admin role.

    Parameters
    ----------
    auth : AuthContext
        Current authenticated caller.

    Returns
    -------
    AuthContext
        The caller if they have admin role.

    Raises
    ------
    ForbiddenError
        If the caller is not an admin.
    """
    if not auth.is_admin:
        raise ForbiddenError("Admin access required")
    return auth


AdminDep = Annotated[AuthContext, Depends(require_admin)]
