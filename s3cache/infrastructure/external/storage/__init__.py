"""Storage: S3-compatible object store client.

create_s3_client() builds the default boto3 client. Any object that
implements ObjectStoreClient (put_object, get_object, head_object,
list_objects_v2, delete_object, delete_objects) can be injected instead.
"""

from s3cache.infrastructure.external.storage.client import create_s3_client
from s3cache.infrastructure.external.storage.protocol import ObjectStoreClient

__all__ = [
    "ObjectStoreClient",
    "create_s3_client",
]
