"""Reusable field checks that raise client-facing messages."""

from typing import Any

from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from healthblog.utils.helpers import normalize_email


def is_blank(value: Any) -> bool:
    """True when ``value`` is not a string or only whitespace."""
    return not isinstance(value, str) or not value.strip()


def checked_email(value: str, message: str = "Valid email is required") -> str:
    """
    Validate and normalise an email address.

    Args:
        value: Raw email input
        message: Message raised when the address is invalid

    Returns:
        str: Lower-cased, trimmed email

    Raises:
        ValueError: If the address is not a valid email
    """
    try:
        _, email = validate_email(value.strip())
    except PydanticCustomError as e:
        raise ValueError(message) from e
    return normalize_email(email)
