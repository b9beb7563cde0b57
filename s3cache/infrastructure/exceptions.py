"""Infrastructure exceptions for cache encoding and batch deletes.

Cache errors extend S3CacheException so callers can handle them
consistently. Store errors (ClientError, BotoCoreError) are not wrapped.
"""

from typing import Any

from s3cache.domain.exceptions import S3CacheException


class CacheException(S3CacheException):
    """Base exception for cache operations."""


class CacheSerializationError(CacheException):
    """Value could not be serialized to JSON (raised before any store call)."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Failed to serialize cache value for key: {key}",
            "CACHE_SERIALIZATION_ERROR",
            {"key": key, "reason": reason},
        )


class CacheDeserializationError(CacheException):
    """Stored object body is not valid JSON."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Failed to parse cached value for key: {key}",
            "CACHE_DESERIALIZATION_ERROR",
            {"key": key, "reason": reason},
        )


class CacheDeleteError(CacheException):
    """Batch delete reported per-key failures."""

    def __init__(self, pattern: str, errors: list[dict[str, Any]]) -> None:
        super().__init__(
            f"Failed to delete {len(errors)} key(s) matching: {pattern}",
            "CACHE_DELETE_ERROR",
            {
                "pattern": pattern,
                "errors": [
                    {
                        "key": e.get("Key"),
                        "code": e.get("Code"),
                        "message": e.get("Message"),
                    }
                    for e in errors
                ],
            },
        )
