"""Shared utilities: datetime."""

from s3cache.shared.utils.datetime import ensure_utc, expires_after, utc_now

__all__ = ["ensure_utc", "expires_after", "utc_now"]
