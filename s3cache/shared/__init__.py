"""Shared utilities: cross-cutting datetime helpers.

Used by domain and infrastructure. No cache logic.
"""

from s3cache.shared.utils import ensure_utc, expires_after, utc_now

__all__ = ["ensure_utc", "expires_after", "utc_now"]
