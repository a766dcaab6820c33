"""
Key-Value Store Repository In-Memory Implementation

Keeps pairs in a process-local dict for the lifetime of the process.
"""

import threading
from typing import Optional

from kvgateway.common.errors import KeyNotFoundError, NotInitializedError
from kvgateway.domain.kv_store import KeyValueModel
from kvgateway.repositories.kv_store_repo import KVStoreRepository


class InMemoryKVStoreRepository(KVStoreRepository):
    """
    Key-Value Store Repository In-Memory Implementation

    The map is allocated lazily by `initialize()`. All access goes through an
    internal lock, so callers never need to synchronize.
    """

    name = "inmemory"

    def __init__(self):
        self._data: Optional[dict[str, str]] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._data is not None

    def initialize(self) -> "InMemoryKVStoreRepository":
        """
        Allocate the backing map

        Idempotent: a second call keeps the existing map and its contents.
        """
        with self._lock:
            if self._data is None:
                self._data = {}
        return self

    async def get(self, key: str) -> KeyValueModel:
        with self._lock:
            if self._data is None:
                raise NotInitializedError()
            try:
                value = self._data[key]
            except KeyError:
                raise KeyNotFoundError(self.name) from None
        return KeyValueModel(key=key, value=value)

    async def set(self, key: str, value: str) -> None:
        with self._lock:
            if self._data is None:
                raise NotInitializedError()
            self._data[key] = value
