"""
MongoDB Connection Management Module

Provides async pymongo client lifecycle management for the record
aggregation backend.
"""

import logging
from typing import Optional

from pymongo import AsyncMongoClient

from kvgateway.common.errors import ConfigError
from kvgateway.config import DatabaseConfig

logger = logging.getLogger(__name__)


async def init_mongodb(cfg: Optional[DatabaseConfig]) -> AsyncMongoClient:
    """
    Initialize MongoDB Connection

    Creates an async client from the descriptor's connection string and
    verifies it with a `ping` command against the primary.

    Args:
        cfg: Backend descriptor; `name` selects the database

    Returns:
        AsyncMongoClient: A connected async client

    Raises:
        ConfigError: If no descriptor is given
        pymongo.errors.PyMongoError: If the server cannot be reached
    """
    if cfg is None:
        raise ConfigError("configuration value is nil")

    client: AsyncMongoClient = AsyncMongoClient(cfg.connection_string)
    try:
        await client.admin.command("ping")
    except Exception:
        await client.close()
        raise

    logger.info("MongoDB connection established: %s", cfg.name)
    return client


async def close_mongodb(client: Optional[AsyncMongoClient]) -> None:
    """Close MongoDB Connection"""
    if client is None:
        return

    await client.close()
    logger.info("MongoDB connection closed")
