"""
API Module Initialization
"""

from kvgateway.api.inmemory import router as inmemory_router
from kvgateway.api.mongodb import router as mongodb_router
from kvgateway.api.redis import router as redis_router

__all__ = [
    "inmemory_router",
    "redis_router",
    "mongodb_router",
]
