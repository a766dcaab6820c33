"""
In-Memory Repository Implementation Module Initialization
"""

from kvgateway.repositories.memory.kv_store_repo import InMemoryKVStoreRepository

__all__ = [
    "InMemoryKVStoreRepository",
]
