"""Tests for the /api/auth endpoints."""

from typing import Any

import pytest
from httpx import AsyncClient

from healthblog.managers.token_manager import decode_access_token
from healthblog.models import UserDB

REGISTER_URL = "/api/auth/register"
LOGIN_URL = "/api/auth/login"
ME_URL = "/api/auth/me"


def _registration(**overrides: Any) -> dict[str, Any]:
    body = {"name": "Jane Doe", "email": "jane@example.com", "password": "secret123"}
    body.update(overrides)
    return body


class TestRegister:
    """Test cases for POST /api/auth/register."""

    async def test_success(self, client: AsyncClient) -> None:
        """Test that registration returns 201 with the user and a token."""
        response = await client.post(REGISTER_URL, json=_registration(email="Jane@Example.COM"))

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        user = body["data"]["user"]
        assert user["email"] == "jane@example.com"
        assert user["role"] == "user"
        assert "createdAt" in user
        assert "password" not in user
        assert "passwordHash" not in user
        assert decode_access_token(body["data"]["token"]).email == "jane@example.com"

    @pytest.mark.parametrize("missing", ["name", "email", "password"])
    async def test_missing_field(self, client: AsyncClient, missing: str) -> None:
        """Test that each required field is enforced."""
        body = _registration()
        del body[missing]

        response = await client.post(REGISTER_URL, json=body)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Name, email and password are required",
        }

    async def test_invalid_email(self, client: AsyncClient) -> None:
        """Test that malformed emails are rejected."""
        response = await client.post(REGISTER_URL, json=_registration(email="not-an-email"))

        assert response.status_code == 400
        assert response.json()["message"] == "Valid email is required"

    async def test_short_password(self, client: AsyncClient) -> None:
        """Test the minimum password length."""
        response = await client.post(REGISTER_URL, json=_registration(password="12345"))

        assert response.status_code == 400
        assert response.json()["message"] == "Password must be at least 6 characters"

    async def test_duplicate_email(self, client: AsyncClient) -> None:
        """Test that the second registration with the same email conflicts."""
        await client.post(REGISTER_URL, json=_registration())

        response = await client.post(REGISTER_URL, json=_registration(email="JANE@example.com"))

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "message": "User already exists with this email",
        }

    async def test_role_cannot_be_chosen(self, client: AsyncClient) -> None:
        """Test that a role in the body is ignored."""
        response = await client.post(REGISTER_URL, json=_registration(role="admin"))

        assert response.json()["data"]["user"]["role"] == "user"


class TestLogin:
    """Test cases for POST /api/auth/login."""

    async def test_success(self, client: AsyncClient, regular_user: UserDB) -> None:
        """Test that valid credentials return a token."""
        response = await client.post(
            LOGIN_URL,
            json={"email": "JANE@example.com", "password": "secret123"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["data"]["user"]["id"] == str(regular_user.id)
        assert decode_access_token(body["data"]["token"]).user_id == regular_user.id

    async def test_wrong_password_and_unknown_email_match(
        self,
        client: AsyncClient,
        regular_user: UserDB,
    ) -> None:
        """Test that both failures are indistinguishable."""
        wrong_password = await client.post(
            LOGIN_URL,
            json={"email": "jane@example.com", "password": "wrong-password"},
        )
        unknown_email = await client.post(
            LOGIN_URL,
            json={"email": "nobody@example.com", "password": "anything"},
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {
            "success": False,
            "message": "Invalid email or password",
        }

    async def test_missing_fields(self, client: AsyncClient) -> None:
        """Test that email and password are required."""
        response = await client.post(LOGIN_URL, json={"email": "jane@example.com"})

        assert response.status_code == 400
        assert response.json()["message"] == "Email and password are required"


class TestMe:
    """Test cases for GET /api/auth/me."""

    async def test_profile(
        self,
        client: AsyncClient,
        regular_user: UserDB,
        auth_headers: dict[str, str],
    ) -> None:
        """Test that the caller's profile is returned."""
        response = await client.get(ME_URL, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Profile retrieved successfully"
        assert body["data"]["name"] == regular_user.name
        assert body["data"]["email"] == regular_user.email

    async def test_without_token(self, client: AsyncClient) -> None:
        """Test that a missing token is 401."""
        response = await client.get(ME_URL)

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Access token required"}

    @pytest.mark.parametrize("header", ["Bearer not-a-token", "Bearer a.b.c"])
    async def test_invalid_token(self, client: AsyncClient, header: str) -> None:
        """Test that a bad token is 401."""
        response = await client.get(ME_URL, headers={"Authorization": header})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    async def test_token_from_registration_works(self, client: AsyncClient) -> None:
        """Test that the token issued at registration authenticates."""
        registered = await client.post(REGISTER_URL, json=_registration())
        token = registered.json()["data"]["token"]

        response = await client.get(ME_URL, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "jane@example.com"
