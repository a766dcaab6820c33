"""
Backend Connection Module Initialization
"""

from kvgateway.db.backends import Backends
from kvgateway.db.memory import init_inmemory
from kvgateway.db.mongodb import close_mongodb, init_mongodb
from kvgateway.db.redis import close_redis, init_redis

__all__ = [
    "Backends",
    "init_inmemory",
    "init_redis",
    "close_redis",
    "init_mongodb",
    "close_mongodb",
]
