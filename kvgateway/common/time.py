"""
Time Utilities

Calendar dates cross the API boundary as `YYYY-MM-DD` strings and are
queried in MongoDB as UTC-aware midnight datetimes.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timezone
from typing import Optional

UTC = timezone.utc

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a strict `YYYY-MM-DD` string.

    - `None` and `""` mean "no date" and return `None`.
    - Anything else that does not match the format (including impossible
      dates such as `2023-02-30`) raises `ValueError`.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValueError(f"date must be a string in {DATE_FORMAT} format")
    return datetime.strptime(value, DATE_FORMAT).date()


def format_date(value: date) -> str:
    """Format a date as `YYYY-MM-DD`."""
    return value.isoformat()


def start_of_day_utc(value: date) -> datetime:
    """Return midnight of `value` as a UTC-aware datetime."""
    return datetime.combine(value, time.min, tzinfo=UTC)
