"""
Key-Value Request Handling

Shared GET/POST handling for the `/inmemory` and `/redis` resources. Errors
use the `{"error": "..."}` envelope.
"""

import logging
from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from kvgateway.api.deps import is_json_request
from kvgateway.api.errors import (
    ERR_INVALID_CONTENT_TYPE,
    ERR_INVALID_INPUT,
    ERR_KEY_EMPTY,
    ERR_METHOD_NOT_ALLOWED,
)
from kvgateway.common.errors import BackendNotConfiguredError
from kvgateway.domain.kv_store import KeyValueModel
from kvgateway.repositories.kv_store_repo import KVStoreRepository

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


async def handle_kv_request(
    request: Request,
    store: Optional[KVStoreRepository],
    backend: str,
) -> JSONResponse:
    """
    Dispatch a key-value request

    Args:
        request: Incoming request
        store: Store backing this resource, None if not configured
        backend: Backend type name, used in the not-configured message
    """
    if request.method not in ("GET", "POST"):
        return error_response(status.HTTP_405_METHOD_NOT_ALLOWED, ERR_METHOD_NOT_ALLOWED)

    if request.method == "POST":
        if not is_json_request(request):
            return error_response(status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, ERR_INVALID_CONTENT_TYPE)
        return await create_or_update(request, store, backend)

    return await get_value(request, store, backend)


async def create_or_update(
    request: Request,
    store: Optional[KVStoreRepository],
    backend: str,
) -> JSONResponse:
    """Store the posted pair, then read it back"""
    body = await request.body()
    try:
        pair = KeyValueModel.model_validate_json(body) if body else KeyValueModel()
    except ValidationError:
        return error_response(status.HTTP_400_BAD_REQUEST, ERR_INVALID_INPUT)

    if not pair.is_complete():
        return error_response(status.HTTP_400_BAD_REQUEST, ERR_INVALID_INPUT)

    if store is None:
        raise BackendNotConfiguredError(backend)

    try:
        await store.set(pair.key, pair.value)
        stored = await store.get(pair.key)
    except Exception as e:
        logger.debug("%s set %r failed: %s", backend, pair.key, e)
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))

    return JSONResponse(content=stored.model_dump())


async def get_value(
    request: Request,
    store: Optional[KVStoreRepository],
    backend: str,
) -> JSONResponse:
    """Read the pair named by the `key` query parameter"""
    key = request.query_params.get("key", "")
    if not key:
        return error_response(status.HTTP_400_BAD_REQUEST, ERR_KEY_EMPTY)

    if store is None:
        raise BackendNotConfiguredError(backend)

    try:
        stored = await store.get(key)
    except Exception as e:
        logger.debug("%s get %r failed: %s", backend, key, e)
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))

    return JSONResponse(content=stored.model_dump())
