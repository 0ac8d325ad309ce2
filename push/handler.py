# push/handler.py
from __future__ import annotations
import logging
from typing import Optional

from common.aws import s3
from common.config import LOG_FORMAT, LOG_LEVEL, PRESIGN_EXP_SECS, Settings, load_settings
from common.resource import bucket_name
from common.storage import new_key, presigned_put

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
log = logging.getLogger("push")


def presigned_url(settings: Settings, client=None, key: Optional[str] = None) -> str:
    """
    Sign a PUT URL for a new, randomly named object in the linked bucket.
    The object itself is not created; the caller uploads to the URL.
    """
    client = client or s3(settings)
    bucket = bucket_name(settings)
    key = key or new_key()

    log.info("Signing PUT for s3://%s/%s (expires in %ss)", bucket, key, PRESIGN_EXP_SECS)
    return presigned_put(client, bucket, key)


def handler(event, context) -> str:
    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        log.info("push invoked (request %s)", request_id)
    return presigned_url(load_settings())
