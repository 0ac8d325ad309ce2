"""
Exceptions raised by the presign functions.
All of them are fatal to the invocation; nothing here is caught and retried.
"""
from typing import Optional


class PresignFunctionError(Exception):
    """Base exception for all function errors"""
    def __init__(self, message: str, detail: Optional[dict] = None):
        self.message = message
        self.detail = detail or {}
        super().__init__(self.message)


# Linked resources

class ResourceError(PresignFunctionError):
    """Base exception for linked-resource lookup"""


class ResourceNotFoundError(ResourceError):
    """Resource is not linked to this function"""


class ResourceShapeError(ResourceError):
    """Resource value is not valid JSON or has the wrong fields"""


# Storage

class StorageError(PresignFunctionError):
    """S3 call or URL signing failed"""


class BucketNotFoundError(StorageError):
    """Bucket doesn't exist"""


class StorageAccessDeniedError(StorageError):
    """Credentials/permissions issue"""


class EmptyBucketError(StorageError):
    """Bucket holds no objects to select from"""
