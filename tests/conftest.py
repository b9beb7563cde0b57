"""Pytest configuration and fixtures for s3cache.

FakeS3Client mimics the boto3 S3 client surface used by S3CacheService:
botocore ClientError codes for missing objects, LastModified/Expires
metadata, and list_objects_v2 continuation-token pagination.
"""

from __future__ import annotations

import io
from datetime import UTC, datetime
from typing import Any

import pytest
from botocore.exceptions import ClientError

from s3cache.core.config import get_settings
from s3cache.infrastructure.cache import S3CacheService

TEST_BUCKET = "test-bucket"


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class FakeS3Client:
    """In-memory S3 client. Records every call as (operation, kwargs)."""

    def __init__(self, page_size: int = 1000) -> None:
        self.page_size = page_size
        self.buckets: dict[str, dict[str, dict[str, Any]]] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _bucket(self, name: str) -> dict[str, dict[str, Any]]:
        return self.buckets.setdefault(name, {})

    def operations(self) -> list[str]:
        return [name for name, _ in self.calls]

    def set_last_modified(self, bucket: str, key: str, when: datetime) -> None:
        self._bucket(bucket)[key]["LastModified"] = when

    def put_object(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("put_object", kwargs))
        obj: dict[str, Any] = {
            "Body": kwargs["Body"],
            "LastModified": datetime.now(UTC),
        }
        if "Expires" in kwargs:
            obj["Expires"] = kwargs["Expires"]
        self._bucket(kwargs["Bucket"])[kwargs["Key"]] = obj
        return {"ETag": '"fake"'}

    def head_object(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("head_object", kwargs))
        obj = self._bucket(kwargs["Bucket"]).get(kwargs["Key"])
        if obj is None:
            raise _client_error("404", "HeadObject")
        head = {"LastModified": obj["LastModified"], "ContentLength": len(obj["Body"])}
        if "Expires" in obj:
            head["Expires"] = obj["Expires"]
        return head

    def get_object(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("get_object", kwargs))
        obj = self._bucket(kwargs["Bucket"]).get(kwargs["Key"])
        if obj is None:
            raise _client_error("NoSuchKey", "GetObject")
        return {"Body": io.BytesIO(obj["Body"]), "LastModified": obj["LastModified"]}

    def list_objects_v2(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("list_objects_v2", kwargs))
        prefix = kwargs.get("Prefix", "")
        keys = sorted(k for k in self._bucket(kwargs["Bucket"]) if k.startswith(prefix))
        start = int(kwargs.get("ContinuationToken", "0"))
        page = keys[start : start + self.page_size]
        resp: dict[str, Any] = {"KeyCount": len(page), "IsTruncated": False}
        if page:
            resp["Contents"] = [{"Key": k} for k in page]
        if start + self.page_size < len(keys):
            resp["IsTruncated"] = True
            resp["NextContinuationToken"] = str(start + self.page_size)
        return resp

    def delete_object(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("delete_object", kwargs))
        self._bucket(kwargs["Bucket"]).pop(kwargs["Key"], None)
        return {}

    def delete_objects(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("delete_objects", kwargs))
        bucket = self._bucket(kwargs["Bucket"])
        for item in kwargs["Delete"]["Objects"]:
            bucket.pop(item["Key"], None)
        return {}


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep cache env vars from the host out of Settings."""
    for name in (
        "S3_BUCKET",
        "S3_REGION",
        "S3_ENDPOINT_URL",
        "S3_ACCESS_KEY",
        "S3_SECRET_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_s3() -> FakeS3Client:
    """Empty in-memory S3 client."""
    return FakeS3Client()


@pytest.fixture
def cache(fake_s3: FakeS3Client) -> S3CacheService:
    """S3CacheService bound to TEST_BUCKET on the fake client."""
    return S3CacheService(bucket=TEST_BUCKET, client=fake_s3)
