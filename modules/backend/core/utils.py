"""
Core Utilities.

Shared utility functions used across the backend.
"""

from datetime import datetime, timezone
from uuid import uuid4


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application are timezone-naive
    and assumed to be UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_timestamp() -> str:
    """
    Current UTC time as sortable ISO 8601 text with millisecond precision.

    Example: 2024-05-01T10:00:00.000Z
    """
    return utc_now().isoformat(timespec="milliseconds") + "Z"


def new_id() -> str:
    """Generate an opaque unique identifier."""
    return str(uuid4())
