# common/storage.py
"""
S3 helpers shared by the functions: list a bucket, pick an object,
and sign GET/PUT URLs for a single key.
"""
import uuid
from datetime import datetime
from typing import Iterable, List, Optional

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel

from .config import PRESIGN_EXP_SECS
from .errors import (
    BucketNotFoundError,
    EmptyBucketError,
    StorageAccessDeniedError,
    StorageError,
)

_ACCESS_DENIED = {"AccessDenied", "InvalidAccessKeyId", "SignatureDoesNotMatch"}


class StorageObject(BaseModel):
    key: str
    last_modified: datetime


def _translate(e: Exception, op: str, bucket: str, key: Optional[str] = None) -> StorageError:
    detail = {"operation": op, "bucket": bucket}
    if key is not None:
        detail["key"] = key

    if isinstance(e, ClientError):
        code = e.response.get("Error", {}).get("Code", "Unknown")
        msg = e.response.get("Error", {}).get("Message", str(e))
        detail["error_code"] = code
        if code == "NoSuchBucket":
            return BucketNotFoundError(message=f"S3 bucket not found: {bucket}", detail=detail)
        if code in _ACCESS_DENIED:
            return StorageAccessDeniedError(message="S3 access denied", detail=detail)
        return StorageError(message=f"S3 {op} failed: {msg}", detail=detail)

    return StorageError(message=f"AWS service error: {e}", detail=detail)


def list_objects(client, bucket: str) -> List[StorageObject]:
    objects: List[StorageObject] = []
    try:
        for page in client.get_paginator("list_objects_v2").paginate(Bucket=bucket):
            for item in page.get("Contents", []):
                objects.append(StorageObject(key=item["Key"], last_modified=item["LastModified"]))
    except (ClientError, BotoCoreError) as e:
        raise _translate(e, "list_objects_v2", bucket) from e
    return objects


def select_object(objects: Iterable[StorageObject]) -> StorageObject:
    # TODO: confirm with the function owner whether the newest object was meant;
    # this keeps the deployed behaviour of picking the smallest timestamp.
    objects = list(objects)
    if not objects:
        raise EmptyBucketError(message="Bucket has no objects")
    return min(objects, key=lambda o: o.last_modified)


def new_key() -> str:
    return str(uuid.uuid4())


def _presign(client, method: str, bucket: str, key: str, expires_in: int) -> str:
    try:
        return client.generate_presigned_url(
            method,
            Params={"Bucket": bucket, "Key": key},
            ExpiresIn=expires_in,
        )
    except (ClientError, BotoCoreError) as e:
        raise _translate(e, method, bucket, key) from e


def presigned_get(client, bucket: str, key: str, expires_in: int = PRESIGN_EXP_SECS) -> str:
    return _presign(client, "get_object", bucket, key, expires_in)


def presigned_put(client, bucket: str, key: str, expires_in: int = PRESIGN_EXP_SECS) -> str:
    return _presign(client, "put_object", bucket, key, expires_in)
