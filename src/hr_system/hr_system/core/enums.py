from __future__ import annotations

from enum import Enum
from typing import Optional


def _normalize_key(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch.isalnum())


class AttendanceStatus(str, Enum):
    """Stored attendance status of a single day."""

    PRESENT = "Present"
    ABSENT = "Absent"
    HALF_DAY = "HalfDay"
    LEAVE = "Leave"
    LATE = "Late"
    EARLY_DEPARTURE = "EarlyDeparture"

    @property
    def label(self) -> str:
        return _ATTENDANCE_LABELS[self]

    @classmethod
    def parse(cls, value) -> Optional["AttendanceStatus"]:
        """Accept the spellings found in stored documents ("Half-Day", "half_day", ...)."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        return _ATTENDANCE_ALIASES.get(_normalize_key(value))


_ATTENDANCE_LABELS = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.ABSENT: "Absent",
    AttendanceStatus.HALF_DAY: "Half Day",
    AttendanceStatus.LEAVE: "Leave",
    AttendanceStatus.LATE: "Late",
    AttendanceStatus.EARLY_DEPARTURE: "Early Departure",
}

_ATTENDANCE_ALIASES = {_normalize_key(s.value): s for s in AttendanceStatus}
_ATTENDANCE_ALIASES.update(
    {
        "earlyleave": AttendanceStatus.EARLY_DEPARTURE,
        "onleave": AttendanceStatus.LEAVE,
    }
)


class ReportStatus(str, Enum):
    """Approval state of a submitted work report."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @classmethod
    def parse(cls, value) -> Optional["ReportStatus"]:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = _normalize_key(value)
        for status in cls:
            if _normalize_key(status.value) == key:
                return status
        return None


class CompletionStatus(str, Enum):
    """Per-day outcome combining attendance duration and work-report state."""

    COMPLETED = "Completed"
    PARTIALLY_COMPLETED = "Partially Completed"
    PENDING_APPROVAL = "Pending Approval"
    REJECTED = "Rejected"
    WORKED_NO_REPORT = "Worked (No Report)"
    INCOMPLETE = "Incomplete"
    NOT_COMPLETED = "Not Completed"


class ViewMode(str, Enum):
    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"


class WorkTimeBucket(str, Enum):
    LESS_THAN_4 = "lessThan4"
    FOUR_TO_EIGHT = "4to8"
    MORE_THAN_8 = "moreThan8"
