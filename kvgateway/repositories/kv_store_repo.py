"""
Key-Value Store Repository Interface

Defines the data access interface shared by the in-memory and Redis stores.
"""

from abc import ABC, abstractmethod

from kvgateway.domain.kv_store import KeyValueModel


class KVStoreRepository(ABC):
    """Key-Value Store Repository Interface"""

    #: Backend name, used as the prefix of error messages
    name: str = "kv"

    @abstractmethod
    async def get(self, key: str) -> KeyValueModel:
        """
        Get value by key

        Args:
            key: The key to look up

        Returns:
            KeyValueModel holding the stored value

        Raises:
            KeyNotFoundError: The key was never written
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Set a key-value pair

        If the key already exists, it is overwritten. No expiration is set.

        Args:
            key: The key to set
            value: The value to store
        """
        pass
