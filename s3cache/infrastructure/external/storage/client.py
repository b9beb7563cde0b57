"""Default S3 client construction (AWS S3, MinIO, DigitalOcean Spaces)."""

from __future__ import annotations

import boto3

from s3cache.infrastructure.external.storage.protocol import ObjectStoreClient


def create_s3_client(
    region: str = "us-east-1",
    endpoint_url: str | None = None,
    access_key: str | None = None,
    secret_key: str | None = None,
) -> ObjectStoreClient:
    """Create a boto3 S3 client. Makes no network call.

    Args:
        region: AWS region.
        endpoint_url: Custom endpoint (MinIO/Spaces); AWS default if None.
        access_key: Optional; uses env/IAM if not set.
        secret_key: Optional.

    Returns:
        boto3 S3 client.
    """
    extra = {} if endpoint_url is None else {"endpoint_url": endpoint_url}
    return boto3.client(
        "s3",
        region_name=region,
        aws_access_key_id=access_key,
        aws_secret_access_key=secret_key,
        **extra,
    )
