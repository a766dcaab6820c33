"""
Redis Connection Management Module

Provides Redis client lifecycle management for the Redis key-value backend.
"""

import logging
import warnings
from typing import Optional
from urllib.parse import urlparse

from redis.asyncio import Redis

from kvgateway.common.errors import ConfigError
from kvgateway.config import DatabaseConfig

logger = logging.getLogger(__name__)


def _check_redis_security(redis_url: str) -> None:
    """
    Check Redis connection security.

    Warns if Redis URL has no password and is not a localhost connection.
    """
    parsed = urlparse(redis_url)

    has_password = bool(parsed.password)
    is_localhost = parsed.hostname in ("localhost", "127.0.0.1", "::1")

    if not has_password and not is_localhost:
        warnings.warn(
            "Redis connection has no password and is not connecting to localhost. "
            "Set a password in the connection string: redis://:password@host:port/db",
            UserWarning,
            stacklevel=3,
        )
        logger.warning("Redis connection without password to non-localhost host detected")


async def init_redis(cfg: Optional[DatabaseConfig]) -> Redis:
    """
    Initialize Redis Connection

    Creates an async Redis client from the descriptor's connection string and
    verifies it with PING.

    Args:
        cfg: Backend descriptor

    Returns:
        Redis: A connected async client

    Raises:
        ConfigError: If no descriptor is given
        ValueError: If the connection string is not a Redis URL
        redis.exceptions.RedisError: If the server cannot be reached
    """
    if cfg is None:
        raise ConfigError("configuration value is nil")

    _check_redis_security(cfg.connection_string)

    client = Redis.from_url(cfg.connection_string, decode_responses=True)
    try:
        await client.ping()
    except Exception:
        await client.aclose()
        raise

    logger.info("Redis connection established: %s", cfg.name)
    return client


async def close_redis(client: Optional[Redis]) -> None:
    """
    Close Redis Connection

    Gracefully closes the Redis client connection.
    """
    if client is None:
        return

    await client.aclose()
    logger.info("Redis connection closed")
