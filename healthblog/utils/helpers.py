from datetime import UTC, datetime
from math import ceil

from fastapi import Request


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return the current local time as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def utc_now() -> datetime:
    """Return the current timezone-aware UTC time."""
    return datetime.now(tz=UTC)


def page_count(total: int, limit: int) -> int:
    """
    Number of pages needed to show ``total`` records ``limit`` at a time.

    Args:
        total: Total number of records
        limit: Page size (must be positive)

    Returns:
        int: ``ceil(total / limit)``
    """
    return ceil(total / limit)


def page_to_skip(page: int, limit: int) -> int:
    """Convert a 1-based page number to a record offset."""
    return (max(page, 1) - 1) * limit


def normalize_email(email: str) -> str:
    """Lower-case and trim an email address."""
    return email.strip().lower()
