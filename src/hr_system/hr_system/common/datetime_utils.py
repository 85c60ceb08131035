from __future__ import annotations

import calendar
from datetime import date, datetime, tzinfo
from typing import Any, Optional

from dateutil import parser as date_parser


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    parsed = datetime.strptime(value, "%Y-%m")
    return parsed.year, parsed.month


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def to_datetime(value: Any, *, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Coerce a stored timestamp (datetime or ISO string) into a datetime.

    Aware values are converted to ``tz`` (or the process local zone) and made
    naive so durations and calendar dates are computed in local time.
    Returns None when the value is missing or cannot be parsed.
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, datetime.min.time())
    elif isinstance(value, str):
        try:
            parsed = date_parser.isoparse(value.strip())
        except (ValueError, OverflowError):
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz).replace(tzinfo=None)
    return parsed


def to_calendar_date(value: Any, *, tz: Optional[tzinfo] = None) -> Optional[date]:
    """Normalize a stored date into its local calendar date (year, month, day)."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    parsed = to_datetime(value, tz=tz)
    return parsed.date() if parsed else None


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, truncated toward zero (may be negative)."""
    return int((end - start).total_seconds() / 60)
