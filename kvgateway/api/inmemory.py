"""
In-Memory Key-Value API
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from kvgateway.api.deps import get_backends
from kvgateway.api.kv import handle_kv_request
from kvgateway.db.backends import INMEMORY

router = APIRouter(tags=["KV - In-Memory"])


async def inmemory(request: Request) -> JSONResponse:
    """
    Process-local key-value store

    - GET `/inmemory?key=...` returns the stored pair
    - POST `{"key": ..., "value": ...}` stores the pair and returns it
    """
    return await handle_kv_request(request, get_backends(request).inmemory, INMEMORY)


# No method list: every verb reaches the handler, which answers 405 itself
router.add_route("/inmemory", inmemory)
