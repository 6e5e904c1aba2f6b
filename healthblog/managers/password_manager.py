"""
Password hashing module using Argon2 with passlib's CryptContext.

Argon2id is the primary scheme; pbkdf2_sha256 hashes are still accepted
and reported as needing a rehash.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from healthblog.configs import CONFIG_MAP, settings
from healthblog.errors import PasswordHashingError
from healthblog.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using the Argon2id algorithm.

    This class wraps passlib's CryptContext to provide:
    - Salted password hashing with Argon2id
    - Password verification that never raises on a bad stored hash
    - Hash deprecation checking
    """

    def __init__(self, level: str | None = None) -> None:
        """
        Initialize the PasswordHasher with Argon2id as the primary scheme.

        Args:
            level: Security level key in ``CONFIG_MAP`` (defaults to
                ``settings.PASSWORD_SECURITY_LEVEL``)
        """
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        config = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=config.memory_cost,
            argon2__time_cost=config.time_cost,
            argon2__parallelism=config.parallelism,
        )
        logger.info("PasswordHasher initialized with Argon2id", level=self.level)

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Every call uses a fresh random salt, so hashing the same password
        twice yields two different strings.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hashed = hasher.hash("my_secure_password")
            >>> hashed.startswith("$argon2id$")
            True
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg) from None

        try:
            hashed_password = self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Invalid password format")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e
        return hashed_password

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """
        Verify a plaintext password against a hashed password.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password to verify against

        Returns:
            bool: True if password matches, False otherwise (including for
            an empty, malformed or unrecognised hash)

        Example:
            >>> hasher = PasswordHasher()
            >>> hashed = hasher.hash("my_password")
            >>> hasher.verify("my_password", hashed)
            True
            >>> hasher.verify("wrong_password", hashed)
            False
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except (ValueError, TypeError, InternalBackendError):
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def dummy_verify(self) -> None:
        """Spend roughly one verification's worth of time without a real hash."""
        self.pwd_context.dummy_verify()

    def check_needs_rehash(self, hashed_password: str) -> bool:
        """
        Check if a hashed password was produced by a deprecated scheme or outdated parameters.

        Args:
            hashed_password: The hashed password to check

        Returns:
            bool: True if rehashing is needed, False otherwise
        """
        try:
            needs_rehash = self.pwd_context.needs_update(hashed_password)
        except ValueError:
            logger.exception("Error checking hash currency", level=self.level)
            return False

        if needs_rehash:
            logger.info("Hash needs update", level=self.level)
        return needs_rehash

    def verify_and_update(
        self,
        password: str,
        hashed_password: str | None,
    ) -> tuple[bool, str | None]:
        """
        Verify a password and produce a fresh hash when the stored one is outdated.

        Args:
            password: The plaintext password to verify
            hashed_password: The stored hash

        Returns:
            tuple[bool, str | None]: Whether the password matched, and a new
            hash to persist (``None`` when the stored hash is current)

        Example:
            >>> hasher = PasswordHasher()
            >>> is_valid, new_hash = hasher.verify_and_update("password123", stored)
            >>> if is_valid and new_hash:
            ...     user.password_hash = new_hash
        """
        if not self.verify(password, hashed_password):
            return False, None

        if hashed_password is None or not self.check_needs_rehash(hashed_password):
            return True, None

        logger.info("Password needs rehashing, new hash generated", level=self.level)
        return True, self.hash(password)


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """
    Get or create the default password hasher instance.

    Returns:
        PasswordHasher: The shared password hasher instance
    """
    global _default_hasher  # noqa: PLW0603
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


async def hash_password(password: str) -> str:
    """
    Hash a password with the default hasher in the worker pool.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def dummy_verify_password() -> None:
    """Run a throwaway verification so unknown accounts cost the same as known ones."""
    await get_running_loop().run_in_executor(executor, get_password_hasher().dummy_verify)


async def verify_and_update_password(
    password: str,
    hashed_password: str | None,
) -> tuple[bool, str | None]:
    """Run ``PasswordHasher.verify_and_update`` with the default hasher in the worker pool."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify_and_update,
        password,
        hashed_password,
    )
