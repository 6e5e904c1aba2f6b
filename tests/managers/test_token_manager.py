"""Tests for the JWT token manager."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from jose import jwt

from healthblog.configs import settings
from healthblog.errors import InvalidTokenError, TokenExpiredError
from healthblog.managers.token_manager import create_access_token, decode_access_token


def _claims(**overrides: object) -> dict[str, object]:
    now = datetime.now(UTC)
    claims: dict[str, object] = {
        "sub": str(uuid4()),
        "email": "jane@example.com",
        "role": "user",
        "jti": str(uuid4()),
        "iat": now,
        "exp": now + timedelta(minutes=5),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": "access",
    }
    claims.update(overrides)
    return claims


def _encode(claims: dict[str, object], key: str = settings.SECRET_KEY) -> str:
    return jwt.encode(claims, key, algorithm=settings.ALGORITHM)


class TestCreateAccessToken:
    """Test cases for create_access_token function."""

    def test_round_trip_claims(self) -> None:
        """Test that the token carries the user's id, email and role."""
        user_id = uuid4()

        token = create_access_token(user_id=user_id, email="jane@example.com", role="admin")
        token_data = decode_access_token(token)

        assert token_data.user_id == user_id
        assert token_data.email == "jane@example.com"
        assert token_data.role == "admin"
        assert token_data.jti

    def test_default_lifetime_is_seven_days(self) -> None:
        """Test that tokens expire after the configured lifetime."""
        token = create_access_token(user_id=uuid4(), email="a@example.com", role="user")
        expires_at = decode_access_token(token).expires_at

        expected = datetime.now(UTC) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        assert abs((expires_at - expected).total_seconds()) < 60

    def test_custom_expiration(self) -> None:
        """Test that a custom lifetime is respected."""
        token = create_access_token(
            user_id=uuid4(),
            email="a@example.com",
            role="user",
            expires_delta=timedelta(hours=2),
        )
        expires_at = decode_access_token(token).expires_at

        expected = datetime.now(UTC) + timedelta(hours=2)
        assert abs((expires_at - expected).total_seconds()) < 60

    def test_each_token_has_unique_jti(self) -> None:
        """Test that two tokens for the same user differ."""
        user_id = uuid4()
        first = create_access_token(user_id=user_id, email="a@example.com", role="user")
        second = create_access_token(user_id=user_id, email="a@example.com", role="user")

        assert decode_access_token(first).jti != decode_access_token(second).jti


class TestDecodeAccessToken:
    """Test cases for decode_access_token function."""

    def test_expired_token(self) -> None:
        """Test that an expired token raises TokenExpiredError."""
        token = create_access_token(
            user_id=uuid4(),
            email="a@example.com",
            role="user",
            expires_delta=timedelta(seconds=-10),
        )

        with pytest.raises(TokenExpiredError):
            decode_access_token(token)

    def test_wrong_signature(self) -> None:
        """Test that a token signed with another key is rejected."""
        token = _encode(_claims(), key="some-other-secret")

        with pytest.raises(InvalidTokenError):
            decode_access_token(token)

    def test_tampered_token(self) -> None:
        """Test that modifying the token invalidates it."""
        token = create_access_token(user_id=uuid4(), email="a@example.com", role="user")
        header, payload, signature = token.split(".")

        with pytest.raises(InvalidTokenError):
            decode_access_token(f"{header}.{payload}x.{signature}")

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token(self, token: str) -> None:
        """Test that malformed strings are rejected."""
        with pytest.raises(InvalidTokenError):
            decode_access_token(token)

    def test_wrong_audience(self) -> None:
        """Test that tokens issued for another audience are rejected."""
        with pytest.raises(InvalidTokenError):
            decode_access_token(_encode(_claims(aud="someone-else")))

    def test_wrong_issuer(self) -> None:
        """Test that tokens from another issuer are rejected."""
        with pytest.raises(InvalidTokenError):
            decode_access_token(_encode(_claims(iss="someone-else")))

    def test_wrong_token_type(self) -> None:
        """Test that non-access tokens are rejected."""
        with pytest.raises(InvalidTokenError):
            decode_access_token(_encode(_claims(type="refresh")))

    def test_subject_must_be_uuid(self) -> None:
        """Test that a token whose subject is not a user id is rejected."""
        with pytest.raises(InvalidTokenError):
            decode_access_token(_encode(_claims(sub="not-a-uuid")))
