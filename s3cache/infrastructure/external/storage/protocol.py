"""Object store client protocol (DIP). Implementation: boto3 S3 client."""

from typing import Any, Protocol


class ObjectStoreClient(Protocol):
    """Subset of the boto3 S3 client API the cache depends on.

    Any client with these methods (boto3, a MinIO-backed boto3 client,
    a test fake) can back S3CacheService. Errors are raised as
    botocore.exceptions.ClientError carrying response["Error"]["Code"].
    """

    def put_object(self, **kwargs: Any) -> dict[str, Any]:
        """Write an object body (Bucket, Key, Body, optional Expires)."""
        ...

    def get_object(self, **kwargs: Any) -> dict[str, Any]:
        """Return object with a readable "Body" stream."""
        ...

    def head_object(self, **kwargs: Any) -> dict[str, Any]:
        """Return metadata ("LastModified", optional "Expires") without body."""
        ...

    def list_objects_v2(self, **kwargs: Any) -> dict[str, Any]:
        """Return one page of "Contents"; "IsTruncated" and
        "NextContinuationToken" drive pagination."""
        ...

    def delete_object(self, **kwargs: Any) -> dict[str, Any]:
        """Delete one object (idempotent)."""
        ...

    def delete_objects(self, **kwargs: Any) -> dict[str, Any]:
        """Delete up to 1000 objects; per-key failures are listed in "Errors"."""
        ...
