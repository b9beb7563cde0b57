"""
UTC datetime utilities for expiry comparisons.

S3 returns timezone-aware datetimes; callers may pass naive ones as
from_date cutoffs. Normalize both sides with these helpers before comparing.
"""

from datetime import UTC, datetime, timedelta


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def expires_after(seconds: float) -> datetime:
    """Return the UTC instant `seconds` from now."""
    return utc_now() + timedelta(seconds=seconds)
