"""
Record Repository MongoDB Implementation

Runs a `$match` + `$group` aggregation over the `records` collection.
"""

from typing import Any

from pymongo.asynchronous.collection import AsyncCollection

from kvgateway.common.time import start_of_day_utc
from kvgateway.domain.record import RecordFilter, RecordModel
from kvgateway.repositories.record_repo import RecordRepository

RECORDS_COLLECTION = "records"

CREATED_AT_FIELD = "created_at"
COUNT_FIELD = "count"
KEY_FIELD = "key"


def _range_clause(field: str, lower: Any, upper: Any) -> dict[str, Any]:
    # An empty document matches everything inside $and.
    if lower is None and upper is None:
        return {}
    bounds: dict[str, Any] = {}
    if lower is not None:
        bounds["$gte"] = lower
    if upper is not None:
        bounds["$lte"] = upper
    return {field: bounds}


def build_pipeline(record_filter: RecordFilter) -> list[dict[str, Any]]:
    """
    Build the aggregation pipeline for a filter

    Args:
        record_filter: Date bounds apply to `created_at` (inclusive, UTC
            midnight), count bounds apply to `count` (inclusive).

    Returns:
        list: `$match` stage followed by a `$group` stage summing `count`
        per `key`
    """
    start = start_of_day_utc(record_filter.start_date) if record_filter.start_date else None
    end = start_of_day_utc(record_filter.end_date) if record_filter.end_date else None

    created_at_clause = _range_clause(CREATED_AT_FIELD, start, end)
    count_clause = _range_clause(COUNT_FIELD, record_filter.min_count, record_filter.max_count)

    return [
        {"$match": {"$and": [created_at_clause, count_clause]}},
        {
            "$group": {
                "_id": f"${KEY_FIELD}",
                "totalCount": {"$sum": f"${COUNT_FIELD}"},
            }
        },
    ]


class MongoRecordRepository(RecordRepository):
    """
    Record Repository MongoDB Implementation

    Query and transport errors from pymongo propagate unchanged.
    """

    def __init__(self, collection: AsyncCollection):
        """
        Initialize Repository

        Args:
            collection: Async pymongo collection holding the raw records
        """
        self.collection = collection

    async def fetch(self, record_filter: RecordFilter) -> list[RecordModel]:
        cursor = await self.collection.aggregate(build_pipeline(record_filter))
        documents = await cursor.to_list(None)
        return [RecordModel.model_validate(doc) for doc in documents]
