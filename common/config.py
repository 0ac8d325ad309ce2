# common/config.py
import os
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field

DEFAULT_REGION = "us-east-1"

# Linked resource names
BUCKET_RESOURCE = "Bucket"
APP_RESOURCE = "App"

PRESIGN_EXP_SECS = 60 * 10  # 10m links, fixed

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


class Settings(BaseModel):
    region: str = DEFAULT_REGION
    endpoint_url: Optional[str] = None  # e.g. a local S3-compatible server
    environ: Dict[str, str] = Field(default_factory=dict, repr=False)  # may hold credentials


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Snapshot the ambient environment into a Settings value.
    Called once per invocation; nothing here talks to AWS.
    """
    env = dict(os.environ if environ is None else environ)
    region = env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION") or DEFAULT_REGION
    endpoint = env.get("AWS_ENDPOINT_URL_S3") or env.get("AWS_ENDPOINT_URL") or None
    return Settings(region=region, endpoint_url=endpoint, environ=env)
