"""
Domain Models Module Initialization
"""

from kvgateway.domain.kv_store import KeyValueModel
from kvgateway.domain.record import RecordFilter, RecordModel, RecordsResponse

__all__ = [
    "KeyValueModel",
    "RecordFilter",
    "RecordModel",
    "RecordsResponse",
]
