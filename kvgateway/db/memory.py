"""
In-Memory Store Initialization
"""

import logging
from typing import Optional

from kvgateway.common.errors import ConfigError
from kvgateway.config import DatabaseConfig
from kvgateway.repositories.memory import InMemoryKVStoreRepository

logger = logging.getLogger(__name__)


def init_inmemory(
    cfg: Optional[DatabaseConfig],
    existing: Optional[InMemoryKVStoreRepository] = None,
) -> InMemoryKVStoreRepository:
    """
    Initialize the in-memory store

    Args:
        cfg: Backend descriptor (its connection string is unused)
        existing: Store created by an earlier call, reused if given

    Returns:
        InMemoryKVStoreRepository: An initialized store

    Raises:
        ConfigError: If no descriptor is given
    """
    if cfg is None:
        raise ConfigError("configuration value is nil")

    if existing is not None:
        return existing.initialize()

    store = InMemoryKVStoreRepository().initialize()
    logger.info("In-memory store initialized: %s", cfg.name)
    return store
