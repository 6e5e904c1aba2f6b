"""Utility helper functions."""

from healthblog.utils.helpers import (
    host,
    normalize_email,
    page_count,
    page_to_skip,
    today_str,
    utc_now,
)

__all__ = [
    "host",
    "normalize_email",
    "page_count",
    "page_to_skip",
    "today_str",
    "utc_now",
]
