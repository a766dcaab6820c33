"""
Key-Value Store Domain Model

Defines the key-value pair exchanged with clients and stores.
"""

from pydantic import BaseModel, Field, StrictStr


class KeyValueModel(BaseModel):
    """Key-Value Pair"""

    key: StrictStr = Field("", description="Key")
    value: StrictStr = Field("", description="Value")

    def is_complete(self) -> bool:
        """Both key and value are non-empty"""
        return bool(self.key) and bool(self.value)
