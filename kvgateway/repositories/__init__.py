"""
Data Access Layer Module Initialization
"""

from kvgateway.repositories.kv_store_repo import KVStoreRepository
from kvgateway.repositories.record_repo import RecordRepository

__all__ = [
    "KVStoreRepository",
    "RecordRepository",
]
