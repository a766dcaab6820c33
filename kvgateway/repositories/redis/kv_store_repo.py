"""
Key-Value Store Repository Redis Implementation

Maps get/set directly onto Redis GET/SET. Values are stored as plain strings
with no expiration.
"""

from redis.asyncio import Redis

from kvgateway.common.errors import KeyNotFoundError
from kvgateway.domain.kv_store import KeyValueModel
from kvgateway.repositories.kv_store_repo import KVStoreRepository


class RedisKVStoreRepository(KVStoreRepository):
    """
    Key-Value Store Repository Redis Implementation

    Errors raised by the Redis client propagate unchanged. A missing key is
    reported as `KeyNotFoundError("redis: nil")`.
    """

    name = "redis"

    def __init__(self, client: Redis):
        """
        Initialize Repository

        Args:
            client: Async Redis client instance created with decode_responses=True
        """
        self.client = client

    async def get(self, key: str) -> KeyValueModel:
        raw = await self.client.get(key)
        if raw is None:
            raise KeyNotFoundError(self.name)
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        return KeyValueModel(key=key, value=raw)

    async def set(self, key: str, value: str) -> None:
        await self.client.set(key, value)
