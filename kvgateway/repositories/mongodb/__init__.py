"""
MongoDB Repository Implementation Module Initialization
"""

from kvgateway.repositories.mongodb.record_repo import MongoRecordRepository, build_pipeline

__all__ = [
    "MongoRecordRepository",
    "build_pipeline",
]
