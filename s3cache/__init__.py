"""s3cache: TTL-aware key/value cache backed by an S3-compatible bucket.

    cache = S3CacheService(bucket="my-cache")
    await cache.set("user:42", {"name": "Ada"}, ttl=60)
    await cache.get("user:42")
    await cache.delete("user:*")
    await cache.clear()
"""

from s3cache.domain.exceptions import S3CacheException, ValidationException
from s3cache.infrastructure.cache import (
    CacheFactory,
    S3CacheService,
)
from s3cache.infrastructure.exceptions import (
    CacheDeleteError,
    CacheDeserializationError,
    CacheException,
    CacheSerializationError,
)

__version__ = "1.0.0"

__all__ = [
    "CacheDeleteError",
    "CacheDeserializationError",
    "CacheException",
    "CacheFactory",
    "CacheSerializationError",
    "S3CacheException",
    "S3CacheService",
    "ValidationException",
]
