# api/main.py
# Local stand-in for the function URLs: each route invokes one handler with an
# empty event and returns its result as the response body.
from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from common.config import LOG_FORMAT, LOG_LEVEL, load_settings
from common.errors import ResourceError
from common.resource import app_info
from pop import handler as pop_fn
from push import handler as push_fn

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
log = logging.getLogger("api")

app = FastAPI(title="Presigned bucket functions")


@app.exception_handler(Exception)
async def _invocation_failed(request: Request, exc: Exception):
    # Same contract as a failed invocation: no structured body
    log.exception("Invocation of %s failed: %s", request.url.path, exc)
    return PlainTextResponse("Internal Server Error", status_code=500)


# ----------------- Health / Root -----------------
@app.get("/health")
def health():
    return {"ok": True}


@app.get("/")
def root():
    try:
        info = app_info(load_settings())
    except ResourceError:
        return {"message": "Presigned bucket functions. See /push and /pop."}
    return {"app": info.name, "stage": info.stage}


# ----------------- Functions -----------------
@app.get("/push", response_class=PlainTextResponse)
def push():
    return push_fn.handler({}, None)


@app.get("/pop", response_class=PlainTextResponse)
def pop():
    return pop_fn.handler({}, None)
