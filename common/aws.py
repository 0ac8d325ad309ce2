# common/aws.py
import boto3
from botocore.config import Config

from .config import Settings


def _boto_cfg(settings: Settings) -> Config:
    # One attempt in total: errors surface to the caller instead of being retried
    return Config(
        region_name=settings.region,
        signature_version="s3v4",
        retries={"total_max_attempts": 1, "mode": "standard"},
        connect_timeout=5,
        read_timeout=30,
    )


def session(settings: Settings):
    return boto3.session.Session(region_name=settings.region)


def s3(settings: Settings):
    return session(settings).client(
        "s3",
        endpoint_url=settings.endpoint_url,
        config=_boto_cfg(settings),
    )
