# common/resource.py
"""
Linked-resource lookup.

Resources linked to a function are published in its environment as JSON,
one variable per resource (SST_RESOURCE_<Name>). When there are too many of
them they are consolidated into a single SST_RESOURCES_JSON object keyed by
resource name.
"""
import json
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .config import APP_RESOURCE, BUCKET_RESOURCE, Settings
from .errors import ResourceNotFoundError, ResourceShapeError

RESOURCE_ENV_PREFIX = "SST_RESOURCE_"
RESOURCES_JSON_ENV = "SST_RESOURCES_JSON"

M = TypeVar("M", bound=BaseModel)


class Bucket(BaseModel):
    name: str


class App(BaseModel):
    name: str
    stage: str


def _decode(name: str, raw: str, source: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as e:
        raise ResourceShapeError(
            message=f"Resource {name} is not valid JSON",
            detail={"resource": name, "source": source},
        ) from e


def _raw_resource(settings: Settings, name: str) -> Any:
    env = settings.environ
    var = RESOURCE_ENV_PREFIX + name
    if var in env:
        return _decode(name, env[var], var)

    if RESOURCES_JSON_ENV in env:
        everything = _decode(name, env[RESOURCES_JSON_ENV], RESOURCES_JSON_ENV)
        if isinstance(everything, dict) and name in everything:
            return everything[name]

    raise ResourceNotFoundError(
        message=f"Resource {name} is not linked",
        detail={"resource": name},
    )


def get_resource(settings: Settings, name: str, model: Type[M]) -> M:
    raw = _raw_resource(settings, name)
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        errors: Dict[str, Any] = {"resource": name, "errors": e.errors(include_url=False)}
        raise ResourceShapeError(message=f"Resource {name} has unexpected shape", detail=errors) from e


def bucket_name(settings: Settings) -> str:
    return get_resource(settings, BUCKET_RESOURCE, Bucket).name


def app_info(settings: Settings) -> App:
    return get_resource(settings, APP_RESOURCE, App)
