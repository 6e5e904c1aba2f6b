"""Tests for the Argon2 password hasher."""

import pytest
from passlib.hash import pbkdf2_sha256

from healthblog.managers.password_manager import (
    PasswordHasher,
    dummy_verify_password,
    get_password_hasher,
    hash_password,
    verify_and_update_password,
)


@pytest.fixture
def hasher() -> PasswordHasher:
    """Create a hasher with the cheapest cost parameters."""
    return PasswordHasher(level="low")


class TestHash:
    """Test cases for PasswordHasher.hash."""

    def test_produces_argon2id_hash(self, hasher: PasswordHasher) -> None:
        """Test that hashes use the Argon2id scheme."""
        hashed = hasher.hash("my_secure_password")

        assert hashed.startswith("$argon2id$")
        assert "my_secure_password" not in hashed

    def test_same_password_hashes_differently(self, hasher: PasswordHasher) -> None:
        """Test that every hash gets its own salt."""
        assert hasher.hash("repeat-me") != hasher.hash("repeat-me")

    def test_empty_password_rejected(self, hasher: PasswordHasher) -> None:
        """Test that an empty password cannot be hashed."""
        with pytest.raises(ValueError, match="cannot be empty"):
            hasher.hash("")


class TestVerify:
    """Test cases for PasswordHasher.verify."""

    def test_correct_password(self, hasher: PasswordHasher) -> None:
        """Test that the original password verifies."""
        hashed = hasher.hash("correct horse")

        assert hasher.verify("correct horse", hashed) is True

    def test_wrong_password(self, hasher: PasswordHasher) -> None:
        """Test that a different password does not verify."""
        hashed = hasher.hash("correct horse")

        assert hasher.verify("battery staple", hashed) is False

    @pytest.mark.parametrize("stored", [None, "", "   ", "not-a-hash", "$argon2id$broken"])
    def test_bad_stored_hash_returns_false(
        self,
        hasher: PasswordHasher,
        stored: str | None,
    ) -> None:
        """Test that malformed stored hashes fail closed instead of raising."""
        assert hasher.verify("anything", stored) is False

    def test_hash_from_other_level_still_verifies(self, hasher: PasswordHasher) -> None:
        """Test that hashes made with other cost parameters keep working."""
        hashed = PasswordHasher(level="medium").hash("portable")

        assert hasher.verify("portable", hashed) is True


class TestNeedsRehash:
    """Test cases for PasswordHasher.check_needs_rehash."""

    def test_current_hash_is_fine(self, hasher: PasswordHasher) -> None:
        """Test that a fresh hash does not need updating."""
        assert hasher.check_needs_rehash(hasher.hash("fresh")) is False

    def test_deprecated_scheme_needs_rehash(self, hasher: PasswordHasher) -> None:
        """Test that pbkdf2 hashes verify but are flagged for rehash."""
        legacy = pbkdf2_sha256.hash("legacy-password")

        assert hasher.verify("legacy-password", legacy) is True
        assert hasher.check_needs_rehash(legacy) is True


class TestVerifyAndUpdate:
    """Test cases for PasswordHasher.verify_and_update."""

    def test_current_hash_is_kept(self, hasher: PasswordHasher) -> None:
        """Test that a current hash verifies without a replacement."""
        assert hasher.verify_and_update("fresh", hasher.hash("fresh")) == (True, None)

    def test_deprecated_hash_is_replaced(self, hasher: PasswordHasher) -> None:
        """Test that a pbkdf2 hash verifies and yields a new Argon2id hash."""
        is_valid, new_hash = hasher.verify_and_update(
            "legacy-password",
            pbkdf2_sha256.hash("legacy-password"),
        )

        assert is_valid is True
        assert new_hash is not None
        assert new_hash.startswith("$argon2id$")
        assert hasher.verify("legacy-password", new_hash) is True

    def test_wrong_password_gets_no_hash(self, hasher: PasswordHasher) -> None:
        """Test that a failed check never produces a replacement."""
        legacy = pbkdf2_sha256.hash("legacy-password")

        assert hasher.verify_and_update("wrong", legacy) == (False, None)
        assert hasher.verify_and_update("wrong", None) == (False, None)


class TestAsyncHelpers:
    """Test cases for the executor-backed helpers."""

    def test_default_hasher_is_shared(self) -> None:
        """Test that the default hasher is created once."""
        assert get_password_hasher() is get_password_hasher()

    async def test_hash_and_verify(self) -> None:
        """Test hashing and verifying through the worker pool."""
        hashed = await hash_password("async-secret")

        assert await verify_and_update_password("async-secret", hashed) == (True, None)
        assert await verify_and_update_password("wrong", hashed) == (False, None)

    async def test_dummy_verify_completes(self) -> None:
        """Test that the throwaway verification runs without error."""
        assert await dummy_verify_password() is None
