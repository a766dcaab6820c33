"""
Storage Gateway

HTTP facade over in-memory/Redis key-value stores and MongoDB record aggregation.
"""

__version__ = "0.1.0"
