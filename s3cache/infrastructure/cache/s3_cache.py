"""S3-backed cache service with client-side TTL expiry and glob deletes.

Values are stored as JSON object bodies under the cache key. A TTL is
written as the object's Expires attribute and checked on read; expired
objects stay in the bucket until deleted. Uses boto3 (sync) via
asyncio.to_thread for the async API.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any

from botocore.exceptions import ClientError

from s3cache.core.constants import (
    DELETE_BATCH_SIZE,
    JSON_CONTENT_TYPE,
    NOT_FOUND_CODES,
    WILDCARD,
)
from s3cache.domain.exceptions import ValidationException
from s3cache.infrastructure.cache.patterns import is_pattern, literal_prefix, matches
from s3cache.infrastructure.exceptions import (
    CacheDeleteError,
    CacheDeserializationError,
    CacheSerializationError,
)
from s3cache.infrastructure.external.storage import ObjectStoreClient, create_s3_client
from s3cache.shared.utils.datetime import ensure_utc, expires_after, utc_now

logger = logging.getLogger(__name__)


def _is_not_found(error: ClientError) -> bool:
    """Return True if a ClientError means the object does not exist."""
    return error.response.get("Error", {}).get("Code") in NOT_FOUND_CODES


def _parse_expires(value: Any) -> datetime | None:
    """Normalize a head_object Expires value to an aware UTC datetime.

    botocore parses Expires into a datetime; some clients hand back the raw
    HTTP-date string (ExpiresString) instead.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    try:
        return ensure_utc(parsedate_to_datetime(str(value)))
    except (TypeError, ValueError):
        logger.warning("Ignoring unparseable Expires value: %r", value)
        return None


class S3CacheService:
    """Async key/value cache stored in an S3 bucket.

    Stateless apart from the bucket name and client handle, so one
    instance may serve any number of concurrent calls. Store errors
    (ClientError, BotoCoreError) propagate unchanged; only "not found"
    on reads and single-key deletes is translated (to a miss / success).
    """

    def __init__(
        self,
        bucket: str | None,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        client: ObjectStoreClient | None = None,
        client_factory: Callable[..., ObjectStoreClient] | None = None,
    ) -> None:
        """Initialize cache service. Makes no network call.

        Args:
            bucket: Bucket name (must already exist).
            region: AWS region.
            endpoint_url: Custom endpoint (MinIO/Spaces).
            access_key: Optional; uses env/IAM if not set.
            secret_key: Optional.
            client: Pre-built client for testing or DI.
            client_factory: Called with region, endpoint_url, access_key and
                secret_key when no client is given; defaults to create_s3_client.

        Raises:
            ValidationException: bucket is missing or empty.
        """
        if not bucket:
            raise ValidationException(
                "Please specify the bucket to use on S3", field="bucket"
            )
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        if client is None:
            factory = client_factory or create_s3_client
            client = factory(
                region=region,
                endpoint_url=endpoint_url,
                access_key=access_key,
                secret_key=secret_key,
            )
        self._client = client

    @property
    def client(self) -> ObjectStoreClient:
        """Underlying object store client."""
        return self._client

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store value as JSON under key, replacing any previous value.

        Args:
            key: Object key; used as-is.
            value: JSON-serializable value (None, 0 and False included).
            ttl: Seconds until expiry; None or negative means never.

        Raises:
            CacheSerializationError: value is not JSON-serializable.
        """
        try:
            serialized = json.dumps(value, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise CacheSerializationError(key, str(e)) from e

        params: dict[str, Any] = {
            "Bucket": self.bucket,
            "Key": key,
            "Body": serialized.encode("utf-8"),
            "ContentType": JSON_CONTENT_TYPE,
        }
        if ttl is not None and ttl >= 0:
            params["Expires"] = expires_after(ttl)

        await asyncio.to_thread(self._client.put_object, **params)
        if "Expires" in params:
            logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        else:
            logger.debug("Cache SET: %s (no expiry)", key)

    async def get(self, key: str, from_date: datetime | None = None) -> Any | None:
        """Return cached value (JSON-deserialized) or None on miss/expiry.

        Metadata is checked first; the body is only fetched for fresh entries.

        Args:
            key: Object key.
            from_date: When set, entries last modified before this instant
                are a miss and the Expires attribute is ignored.

        Returns:
            Cached value or None.

        Raises:
            CacheDeserializationError: stored body is not valid JSON.
        """

        def _head() -> dict[str, Any] | None:
            try:
                return self._client.head_object(Bucket=self.bucket, Key=key)
            except ClientError as e:
                if _is_not_found(e):
                    return None
                raise

        head = await asyncio.to_thread(_head)
        if head is None:
            logger.debug("Cache MISS: %s", key)
            return None
        if not self._is_fresh(head, from_date):
            logger.debug("Cache EXPIRED: %s", key)
            return None

        def _get() -> bytes | None:
            try:
                resp = self._client.get_object(Bucket=self.bucket, Key=key)
            except ClientError as e:
                if _is_not_found(e):
                    return None
                raise
            return resp["Body"].read()

        body = await asyncio.to_thread(_get)
        if body is None:
            logger.debug("Cache MISS: %s (deleted after head)", key)
            return None
        try:
            value = json.loads(body)
        except ValueError as e:
            raise CacheDeserializationError(key, str(e)) from e
        logger.debug("Cache HIT: %s", key)
        return value

    @staticmethod
    def _is_fresh(head: dict[str, Any], from_date: datetime | None) -> bool:
        """Apply the from_date cutoff, or else the Expires attribute."""
        if from_date is not None:
            last_modified = ensure_utc(head.get("LastModified"))
            if last_modified is None:
                return True
            return last_modified >= ensure_utc(from_date)

        expires = _parse_expires(head.get("Expires", head.get("ExpiresString")))
        return expires is None or expires >= utc_now()

    async def delete(self, key: str) -> None:
        """Remove key from cache; a key containing "*" is a glob pattern.

        Deleting a missing key succeeds.

        Args:
            key: Object key or glob pattern (e.g. "session:*").
        """
        if is_pattern(key):
            await self.delete_pattern(key)
            return

        def _delete() -> None:
            try:
                self._client.delete_object(Bucket=self.bucket, Key=key)
            except ClientError as e:
                if not _is_not_found(e):
                    raise

        await asyncio.to_thread(_delete)
        logger.debug("Cache DELETE: %s", key)

    def _list_keys(self, prefix: str) -> list[str]:
        """List every key under prefix, following continuation tokens."""
        keys: list[str] = []
        params: dict[str, Any] = {"Bucket": self.bucket, "Prefix": prefix}
        while True:
            page = self._client.list_objects_v2(**params)
            keys.extend(obj["Key"] for obj in page.get("Contents") or [])
            if not page.get("IsTruncated"):
                return keys
            token = page.get("NextContinuationToken")
            if not token:
                logger.warning(
                    "Listing of %s/%s truncated without continuation token; "
                    "stopping after %s keys",
                    self.bucket,
                    prefix,
                    len(keys),
                )
                return keys
            params["ContinuationToken"] = token

    async def delete_pattern(self, pattern: str) -> int:
        """Delete all keys matching a glob pattern.

        Lists the literal prefix of the pattern (all pages), filters with
        shell-glob matching, then deletes matches in batches of 1000.

        Args:
            pattern: Glob pattern (e.g. "user:42:*", "reports/*/2024-??").

        Returns:
            Number of keys deleted.

        Raises:
            CacheDeleteError: the store reported per-key delete failures.
        """
        prefix = literal_prefix(pattern)
        keys = await asyncio.to_thread(self._list_keys, prefix)
        to_delete = [k for k in keys if matches(pattern, k)]
        if not to_delete:
            logger.debug("Cache INVALIDATE: %s (no matches)", pattern)
            return 0

        deleted = 0
        for start in range(0, len(to_delete), DELETE_BATCH_SIZE):
            chunk = to_delete[start : start + DELETE_BATCH_SIZE]
            resp = await asyncio.to_thread(
                self._client.delete_objects,
                Bucket=self.bucket,
                Delete={"Objects": [{"Key": k} for k in chunk], "Quiet": True},
            )
            errors = [
                e
                for e in (resp or {}).get("Errors") or []
                if e.get("Code") not in NOT_FOUND_CODES
            ]
            if errors:
                raise CacheDeleteError(pattern, errors)
            deleted += len(chunk)

        logger.info("Cache INVALIDATE: %s (%s keys)", pattern, deleted)
        return deleted

    async def clear(self) -> int:
        """Delete every object in the bucket. Use with caution.

        Returns:
            Number of keys deleted (0 for an empty bucket).
        """
        deleted = await self.delete_pattern(WILDCARD)
        logger.warning("Cache CLEARED: %s keys deleted from %s", deleted, self.bucket)
        return deleted
