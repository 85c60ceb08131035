from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Any, Mapping, Optional

from ..common.datetime_utils import to_calendar_date, to_datetime
from ..core.enums import AttendanceStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one attendance punch record for an employee-day."""

    entry_id: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    hours_worked: Optional[float] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any], *, tz: Optional[tzinfo] = None) -> Optional["AttendanceEntry"]:
        """Build an entry from a stored document.

        Returns None (and logs) when the date or status cannot be understood,
        so the caller can simply drop the record.
        """
        entry_id = str(doc.get("id") or doc.get("_id") or "")
        work_date = to_calendar_date(doc.get("date"), tz=tz)
        if work_date is None:
            logger.warning("[attendance] skip entry id=%s: unparsable date %r", entry_id, doc.get("date"))
            return None

        status = AttendanceStatus.parse(doc.get("status"))
        if status is None:
            logger.warning("[attendance] skip entry id=%s: unknown status %r", entry_id, doc.get("status"))
            return None

        hours = doc.get("hoursWorked", doc.get("hours_worked"))
        try:
            hours_worked = float(hours) if hours is not None else None
        except (TypeError, ValueError):
            hours_worked = None
        if hours_worked is not None and not math.isfinite(hours_worked):
            logger.warning("[attendance] entry id=%s: ignoring non-finite hoursWorked %r", entry_id, hours)
            hours_worked = None

        return cls(
            entry_id=entry_id,
            employee_id=str(doc.get("employeeId") or doc.get("employee_id") or ""),
            work_date=work_date,
            status=status,
            check_in=to_datetime(doc.get("checkIn", doc.get("check_in")), tz=tz),
            check_out=to_datetime(doc.get("checkOut", doc.get("check_out")), tz=tz),
            hours_worked=hours_worked,
        )


def coerce_attendance_entries(items, *, tz: Optional[tzinfo] = None) -> list[AttendanceEntry]:
    """Accept entries or raw documents; malformed documents are dropped."""
    out: list[AttendanceEntry] = []
    for item in items or ():
        if isinstance(item, AttendanceEntry):
            out.append(item)
        elif isinstance(item, Mapping):
            entry = AttendanceEntry.from_document(item, tz=tz)
            if entry is not None:
                out.append(entry)
        else:
            logger.warning("[attendance] skip unsupported record type %s", type(item).__name__)
    return out
