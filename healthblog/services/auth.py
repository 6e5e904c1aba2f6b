"""Authentication service: registration, login and profile lookup."""

from healthblog.auth.permissions import AuthContext
from healthblog.errors import ConflictError, InvalidCredentialsError, NotFoundError
from healthblog.managers.password_manager import (
    dummy_verify_password,
    hash_password,
    verify_and_update_password,
)
from healthblog.managers.token_manager import create_access_token
from healthblog.models import UserDB
from healthblog.monitoring import get_logger
from healthblog.repositories import UserRepository
from healthblog.schemas.auth import AuthResult, UserRegister
from healthblog.schemas.user import UserResponse
from healthblog.utils.helpers import normalize_email

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    @staticmethod
    def issue_token(user: UserDB) -> AuthResult:
        """Build the register/login payload for ``user``."""
        token = create_access_token(user_id=user.id, email=user.email, role=user.role)
        return AuthResult(user=UserResponse.model_validate(user), token=token)

    async def register(self, data: UserRegister) -> AuthResult:
        """
        Create a new account with role ``user`` and sign it in.

        Args:
            data: Validated registration body

        Returns:
            AuthResult: The new user and an access token

        Raises:
            ConflictError: If the email (compared case-insensitively) is taken
        """
        email = normalize_email(data.email or "")
        if await self.user_repo.email_exists(email):
            raise ConflictError("User already exists with this email")

        user = await self.user_repo.create(
            {
                "name": data.name,
                "email": email,
                "password_hash": await hash_password(data.password or ""),
                "role": "user",
            },
        )
        logger.info("User registered", user_id=str(user.id))
        return self.issue_token(user)

    async def authenticate_user(self, email: str, password: str) -> UserDB:
        """
        Check an email/password pair.

        Unknown emails and wrong passwords raise the same error, and an
        unknown email still costs one password verification. A hash made
        with a deprecated scheme is replaced on a successful check.

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.find_by_email(email)
        if not user:
            await dummy_verify_password()
            raise InvalidCredentialsError

        is_valid, new_hash = await verify_and_update_password(password, user.password_hash)
        if not is_valid:
            raise InvalidCredentialsError

        if new_hash:
            user = await self.user_repo.update_by_id(user.id, {"password_hash": new_hash}) or user
            logger.info("Password hash upgraded", user_id=str(user.id))

        return user

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Sign in with email and password.

        Returns:
            AuthResult: The user and a fresh access token

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.authenticate_user(email, password)
        logger.info("User logged in", user_id=str(user.id))
        return self.issue_token(user)

    async def get_profile(self, auth: AuthContext) -> UserResponse:
        """
        Return the caller's account.

        Raises:
            NotFoundError: If the account was deleted after the token was issued
        """
        user = await self.user_repo.find_by_id(auth.user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserResponse.model_validate(user)
