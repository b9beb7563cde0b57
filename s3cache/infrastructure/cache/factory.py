"""Cache service factory: creates the S3 cache from settings."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from s3cache.infrastructure.cache.s3_cache import S3CacheService

if TYPE_CHECKING:
    from s3cache.core.config import Settings
    from s3cache.infrastructure.external.storage import ObjectStoreClient


class CacheFactory:
    """Factory for cache service instances based on configuration."""

    @staticmethod
    def create_cache_service(
        settings: "Settings | None" = None,
        client_factory: "Callable[..., ObjectStoreClient] | None" = None,
    ) -> S3CacheService:
        """Create cache service from settings.

        Args:
            settings: Settings; if None, uses get_settings().
            client_factory: Optional override for the boto3 client factory.

        Returns:
            S3CacheService.

        Raises:
            ValueError: S3_BUCKET is not configured.
        """
        from s3cache.core.config import get_settings

        s = settings or get_settings()
        if not s.s3_bucket:
            raise ValueError("S3_BUCKET required for S3 cache")
        return S3CacheService(
            bucket=s.s3_bucket,
            region=s.s3_region,
            endpoint_url=s.s3_endpoint_url,
            access_key=s.s3_access_key,
            secret_key=(
                s.s3_secret_key.get_secret_value() if s.s3_secret_key else None
            ),
            client_factory=client_factory,
        )
