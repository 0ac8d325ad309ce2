# pop/handler.py
from __future__ import annotations
import logging

from common.aws import s3
from common.config import LOG_FORMAT, LOG_LEVEL, PRESIGN_EXP_SECS, Settings, load_settings
from common.resource import bucket_name
from common.storage import list_objects, presigned_get, select_object

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
log = logging.getLogger("pop")


def latest(settings: Settings, client=None) -> str:
    """
    Sign a GET URL for the object picked from the linked bucket.
    Any failure propagates; there is no partial result.
    """
    client = client or s3(settings)
    bucket = bucket_name(settings)

    objects = list_objects(client, bucket)
    log.info("Listed %d objects in s3://%s", len(objects), bucket)
    obj = select_object(objects)

    log.info("Signing GET for s3://%s/%s (expires in %ss)", bucket, obj.key, PRESIGN_EXP_SECS)
    return presigned_get(client, bucket, obj.key)


def handler(event, context) -> str:
    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        log.info("pop invoked (request %s)", request_id)
    return latest(load_settings())
