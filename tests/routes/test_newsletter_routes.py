"""Tests for the /api/newsletter endpoints."""

import pytest
from httpx import AsyncClient

SUBSCRIBE_URL = "/api/newsletter/subscribe"
UNSUBSCRIBE_URL = "/api/newsletter/unsubscribe"
SUBSCRIBERS_URL = "/api/newsletter/subscribers"


class TestNewsletterRoutes:
    """Test cases for subscribe, unsubscribe and the subscriber list."""

    async def test_subscribe_lifecycle(self, client: AsyncClient) -> None:
        """Test subscribe, duplicate subscribe, unsubscribe and a second unsubscribe."""
        first = await client.post(SUBSCRIBE_URL, json={"email": "a@b.com"})
        again = await client.post(SUBSCRIBE_URL, json={"email": "A@B.com"})
        removed = await client.post(UNSUBSCRIBE_URL, json={"email": "a@b.com"})
        removed_again = await client.post(UNSUBSCRIBE_URL, json={"email": "a@b.com"})

        assert first.status_code == 201
        assert first.json() == {"success": True, "message": "Successfully subscribed to newsletter"}
        assert again.status_code == 409
        assert again.json()["message"] == "Email already subscribed to newsletter"
        assert removed.status_code == 200
        assert removed.json() == {"success": True, "message": "Successfully unsubscribed"}
        assert removed_again.status_code == 404
        assert removed_again.json()["message"] == "Email not found in subscribers"

    @pytest.mark.parametrize(
        ("body", "message"),
        [
            ({}, "Email is required"),
            ({"email": "  "}, "Email is required"),
            ({"email": "not-an-email"}, "Invalid email format"),
        ],
    )
    async def test_invalid_body(
        self,
        client: AsyncClient,
        body: dict[str, str],
        message: str,
    ) -> None:
        """Test the email checks."""
        response = await client.post(SUBSCRIBE_URL, json=body)

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": message}

    async def test_subscribers_admin_only(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        admin_headers: dict[str, str],
    ) -> None:
        """Test that only admins can list subscribers."""
        await client.post(SUBSCRIBE_URL, json={"email": "reader@example.com"})

        anonymous = await client.get(SUBSCRIBERS_URL)
        regular = await client.get(SUBSCRIBERS_URL, headers=auth_headers)
        admin = await client.get(SUBSCRIBERS_URL, headers=admin_headers)

        assert anonymous.status_code == 401
        assert regular.status_code == 403
        assert admin.status_code == 200
        assert admin.json()["message"] == "Subscribers retrieved successfully"
        [subscriber] = admin.json()["data"]
        assert subscriber["email"] == "reader@example.com"
        assert "subscribedOn" in subscriber
