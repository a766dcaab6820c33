"""
Backend Registry

Owns the one-per-type backend instances created from the configuration's
database descriptors. The entry point creates a single registry and hands
it to the request handlers; nothing is kept in module globals.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from kvgateway.config import DatabaseConfig
from kvgateway.db.memory import init_inmemory
from kvgateway.db.mongodb import close_mongodb, init_mongodb
from kvgateway.db.redis import close_redis, init_redis
from kvgateway.repositories.kv_store_repo import KVStoreRepository
from kvgateway.repositories.memory import InMemoryKVStoreRepository
from kvgateway.repositories.mongodb import MongoRecordRepository
from kvgateway.repositories.mongodb.record_repo import RECORDS_COLLECTION
from kvgateway.repositories.record_repo import RecordRepository
from kvgateway.repositories.redis import RedisKVStoreRepository

logger = logging.getLogger(__name__)

INMEMORY = "inmemory"
REDIS = "redis"
MONGODB = "mongodb"


@dataclass
class Backends:
    """
    Active backend instances, at most one per type

    Fields left as None correspond to backend types absent from the
    configuration.
    """

    inmemory: Optional[KVStoreRepository] = None
    redis: Optional[KVStoreRepository] = None
    records: Optional[RecordRepository] = None
    redis_client: Optional[Any] = None
    mongo_client: Optional[Any] = None

    async def initialize(self, databases: list[DatabaseConfig]) -> "Backends":
        """
        Initialize every configured backend

        Dispatches on each descriptor's `type`. Unknown types are skipped.
        Connection failures close whatever was already opened, then
        propagate so that startup aborts.
        """
        try:
            for cfg in databases:
                if cfg.type == INMEMORY:
                    self.init_inmemory(cfg)
                elif cfg.type == REDIS:
                    await self.init_redis(cfg)
                elif cfg.type == MONGODB:
                    await self.init_mongodb(cfg)
                else:
                    logger.warning("Ignoring database %r with unknown type %r", cfg.name, cfg.type)
        except Exception:
            await self.close()
            raise
        return self

    def init_inmemory(self, cfg: Optional[DatabaseConfig]) -> KVStoreRepository:
        """Create the in-memory store, or return the existing one"""
        existing = self.inmemory if isinstance(self.inmemory, InMemoryKVStoreRepository) else None
        self.inmemory = init_inmemory(cfg, existing=existing)
        return self.inmemory

    async def init_redis(self, cfg: Optional[DatabaseConfig]) -> KVStoreRepository:
        """Connect to Redis, or return the existing store"""
        if self.redis is not None:
            return self.redis
        self.redis_client = await init_redis(cfg)
        self.redis = RedisKVStoreRepository(self.redis_client)
        return self.redis

    async def init_mongodb(self, cfg: Optional[DatabaseConfig]) -> RecordRepository:
        """Connect to MongoDB, or return the existing repository"""
        if self.records is not None:
            return self.records
        self.mongo_client = await init_mongodb(cfg)
        collection = self.mongo_client[cfg.name][RECORDS_COLLECTION]
        self.records = MongoRecordRepository(collection)
        return self.records

    async def close(self) -> None:
        """Close network clients opened by this registry"""
        await close_redis(self.redis_client)
        self.redis_client = None
        await close_mongodb(self.mongo_client)
        self.mongo_client = None
