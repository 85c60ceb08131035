from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Iterator, Optional

from dateutil.relativedelta import relativedelta

from ..common.datetime_utils import days_in_month, to_calendar_date
from ..core.constants import DEFAULT_WEEK_STARTS_ON
from ..core.enums import ViewMode
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class CalendarWindow:
    """Inclusive run of calendar days around an anchor date.

    A month window always spans the whole month the anchor falls in and a week
    window the whole week (``week_starts_on``: 0 = Monday ... 6 = Sunday).
    Custom windows cover ``anchor..custom_end``.
    """

    anchor: date
    mode: ViewMode = ViewMode.MONTH
    week_starts_on: int = DEFAULT_WEEK_STARTS_ON
    custom_end: Optional[date] = None

    def __post_init__(self):
        if not 0 <= int(self.week_starts_on) <= 6:
            raise ValidationError("week_starts_on must be between 0 and 6")
        if self.mode == ViewMode.CUSTOM:
            if self.custom_end is None:
                raise ValidationError("A custom window needs an end date")
            if self.custom_end < self.anchor:
                raise ValidationError("End date must be on or after start date")

    @classmethod
    def around(cls, reference: Any, mode: ViewMode | str = ViewMode.MONTH, *, week_starts_on: int = DEFAULT_WEEK_STARTS_ON) -> "CalendarWindow":
        anchor = to_calendar_date(reference)
        if anchor is None:
            raise ValidationError(f"Invalid reference date: {reference!r}")
        try:
            mode = ViewMode(mode)
        except ValueError:
            raise ValidationError(f"Unknown view mode: {mode!r}")
        if mode == ViewMode.CUSTOM:
            raise ValidationError("Use CalendarWindow.custom() for custom ranges")
        return cls(anchor=anchor, mode=mode, week_starts_on=week_starts_on)

    @classmethod
    def for_month(cls, year: int, month: int) -> "CalendarWindow":
        try:
            anchor = date(int(year), int(month), 1)
        except ValueError:
            raise ValidationError(f"Invalid month: {year}-{month}")
        return cls(anchor=anchor, mode=ViewMode.MONTH)

    @classmethod
    def custom(cls, start: Any, end: Any) -> "CalendarWindow":
        start_d = to_calendar_date(start)
        end_d = to_calendar_date(end)
        if start_d is None or end_d is None:
            raise ValidationError("Invalid custom date range")
        return cls(anchor=start_d, mode=ViewMode.CUSTOM, custom_end=end_d)

    @property
    def start(self) -> date:
        if self.mode == ViewMode.MONTH:
            return self.anchor.replace(day=1)
        if self.mode == ViewMode.WEEK:
            offset = (self.anchor.weekday() - self.week_starts_on) % 7
            return self.anchor - timedelta(days=offset)
        return self.anchor

    @property
    def end(self) -> date:
        if self.mode == ViewMode.MONTH:
            return self.anchor.replace(day=days_in_month(self.anchor.year, self.anchor.month))
        if self.mode == ViewMode.WEEK:
            return self.start + timedelta(days=6)
        return self.custom_end

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def __iter__(self) -> Iterator[date]:
        day = self.start
        while day <= self.end:
            yield day
            day += timedelta(days=1)

    def __contains__(self, day: object) -> bool:
        if isinstance(day, datetime):
            day = day.date()
        return isinstance(day, date) and self.start <= day <= self.end

    def days(self) -> list[date]:
        return list(self)

    def step(self, count: int = 1) -> "CalendarWindow":
        """Move the anchor by whole weeks or calendar months; custom windows stay put."""
        if self.mode == ViewMode.WEEK:
            return CalendarWindow(anchor=self.anchor + timedelta(weeks=count), mode=self.mode, week_starts_on=self.week_starts_on)
        if self.mode == ViewMode.MONTH:
            return CalendarWindow(anchor=self.anchor + relativedelta(months=count), mode=self.mode, week_starts_on=self.week_starts_on)
        return self

    def next(self) -> "CalendarWindow":
        return self.step(1)

    def previous(self) -> "CalendarWindow":
        return self.step(-1)

    def label(self) -> str:
        return f"{self.start:%b} {self.start.day} - {self.end:%b} {self.end.day}, {self.end.year}"
