"""Application configuration (settings and environment).

Single source of truth for cache configuration. Uses pydantic-settings
with .env support. The bucket is not required at load time; the cache
factory validates it when a cache service is created.
"""

from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment and .env."""

    # Storage
    s3_bucket: str | None = None
    s3_region: str = "us-east-1"
    s3_endpoint_url: str | None = None  # MinIO / self-hosted S3-compatible store
    s3_access_key: str | None = None
    s3_secret_key: SecretStr | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("s3_bucket", "s3_endpoint_url", "s3_access_key", mode="before")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        """Treat empty env values (e.g. S3_ENDPOINT_URL=) as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars
    so the next get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
