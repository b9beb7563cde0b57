"""Cache: S3-backed cache service, glob helpers, and factory.

S3CacheService stores JSON values in a bucket with client-side TTL
expiry. CacheFactory builds it from s3cache.core.config.
"""

from s3cache.infrastructure.cache.factory import CacheFactory
from s3cache.infrastructure.cache.patterns import is_pattern, literal_prefix, matches
from s3cache.infrastructure.cache.s3_cache import S3CacheService

__all__ = [
    "CacheFactory",
    "S3CacheService",
    "is_pattern",
    "literal_prefix",
    "matches",
]
