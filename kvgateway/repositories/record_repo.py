"""
Record Repository Interface

Defines the read-only aggregation interface over the records collection.
"""

from abc import ABC, abstractmethod

from kvgateway.domain.record import RecordFilter, RecordModel


class RecordRepository(ABC):
    """Record Repository Interface"""

    @abstractmethod
    async def fetch(self, record_filter: RecordFilter) -> list[RecordModel]:
        """
        Group records by key and sum their counts

        Args:
            record_filter: Optional date and count bounds

        Returns:
            One RecordModel per key, in no particular order. Empty if
            nothing matched.
        """
        pass
