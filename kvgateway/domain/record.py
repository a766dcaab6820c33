"""
Record Aggregation Domain Models

Defines the aggregation filter accepted by `/mongodb/records`, the grouped
record it returns and the response envelope.
"""

from datetime import date
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    field_serializer,
    field_validator,
)

from kvgateway.common.time import format_date, parse_date


class RecordFilter(BaseModel):
    """
    Aggregation Filter

    Every bound is optional; absent bounds impose no constraint and present
    bounds combine conjunctively.
    """

    start_date: Optional[date] = Field(None, alias="startDate", description="Lower bound of created_at")
    end_date: Optional[date] = Field(None, alias="endDate", description="Upper bound of created_at")
    min_count: Optional[StrictInt] = Field(None, alias="minCount", description="Lower bound of count")
    max_count: Optional[StrictInt] = Field(None, alias="maxCount", description="Upper bound of count")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Optional[date]:
        if isinstance(value, date):
            return value
        return parse_date(value)

    @field_serializer("start_date", "end_date")
    def _serialize_date(self, value: Optional[date]) -> Optional[str]:
        if value is None:
            return None
        return format_date(value)

    def has_date_bounds(self) -> bool:
        return self.start_date is not None or self.end_date is not None

    def has_count_bounds(self) -> bool:
        return self.min_count is not None or self.max_count is not None


class RecordModel(BaseModel):
    """Grouped Record"""

    key: str = Field(..., validation_alias="_id", serialization_alias="key")
    created_at: str = Field("", validation_alias="createdAt", serialization_alias="createdAt")
    total_count: int = Field(0, validation_alias="totalCount", serialization_alias="totalCount")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("key", "created_at", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)


class RecordsResponse(BaseModel):
    """
    Aggregation Response Envelope

    `code` is 0 on success and 1 on any failure; `records` is only present on
    success.
    """

    code: int
    msg: str
    records: Optional[list[RecordModel]] = None

    @classmethod
    def success(cls, records: list[RecordModel]) -> "RecordsResponse":
        return cls(code=0, msg="success", records=records)

    @classmethod
    def failure(cls, message: str) -> "RecordsResponse":
        return cls(code=1, msg=message)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
