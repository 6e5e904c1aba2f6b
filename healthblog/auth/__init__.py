from healthblog.auth.permissions import (
    AdminDep,
    AuthContext,
    AuthDep,
    get_auth_context,
    require_admin,
)

__all__ = [
    "AdminDep",
    "AuthContext",
    "AuthDep",
    "get_auth_context",
    "require_admin",
]
