"""
Error Definitions

Defines custom exception classes used by the stores, the configuration
loader and the HTTP layer.
"""

from typing import Any


class AppError(Exception):
    """
    Application Base Exception

    Base class for all custom exceptions, carrying the message that is
    returned to clients and the HTTP status used when nothing more specific
    applies.
    """

    def __init__(self, message: str, status_code: int = 500):
        """
        Initialize exception

        Args:
            message: Error message
            status_code: HTTP status code
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert to the `{"error": ...}` response envelope"""
        return {"error": self.message}


class StoreError(AppError):
    """
    Store Error

    Raised by a key-value store or record repository. The message is passed
    through to clients verbatim.
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message=message, status_code=status_code)


class KeyNotFoundError(StoreError):
    """
    Key Not Found Error

    Raised when a key has never been written (or was evicted by the backend).
    """

    def __init__(self, backend: str):
        super().__init__(f"{backend}: nil")
        self.backend = backend


class NotInitializedError(StoreError):
    """Raised when the in-memory store is used before `initialize()`"""

    def __init__(self, message: str = "inmemory: initialize inmemory first"):
        super().__init__(message)


class BackendNotConfiguredError(StoreError):
    """Raised when a route is hit for a backend type missing from the config"""

    def __init__(self, backend: str):
        super().__init__(f"{backend}: backend not configured")
        self.backend = backend


class ConfigError(AppError):
    """
    Configuration Error

    Raised when the configuration file is missing or malformed, or when a
    backend initializer is called without a descriptor.
    """

    def __init__(self, message: str = "config file value not given"):
        super().__init__(message=message, status_code=500)
