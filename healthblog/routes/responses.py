"""Shared OpenAPI response documentation for error envelopes."""

from typing import Any


def error_example(description: str, message: str) -> dict[str, Any]:
    return {
        "description": description,
        "content": {"application/json": {"example": {"success": False, "message": message}}},
    }


BAD_REQUEST = {400: error_example("Validation failed", "Title, content and category are required")}
UNAUTHORIZED = {401: error_example("Missing or invalid token", "Access token required")}
FORBIDDEN = {403: error_example("Caller is not an admin", "Admin access required")}
ADMIN_ONLY = UNAUTHORIZED | FORBIDDEN


def not_found(message: str) -> dict[int, dict[str, Any]]:
    return {404: error_example("Not found", message)}


def conflict(message: str) -> dict[int, dict[str, Any]]:
    return {409: error_example("Already exists", message)}
