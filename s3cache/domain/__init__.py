"""Domain layer: package exceptions.

No dependencies on infrastructure. Used by the cache service and factories.
"""

from s3cache.domain.exceptions import S3CacheException, ValidationException

__all__ = ["S3CacheException", "ValidationException"]
