"""
Redis Key-Value API
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from kvgateway.api.deps import get_backends
from kvgateway.api.kv import handle_kv_request
from kvgateway.db.backends import REDIS

router = APIRouter(tags=["KV - Redis"])


async def redis(request: Request) -> JSONResponse:
    """
    Redis-backed key-value store

    Same contract as `/inmemory`; values live until Redis evicts them.
    """
    return await handle_kv_request(request, get_backends(request).redis, REDIS)


router.add_route("/redis", redis)
