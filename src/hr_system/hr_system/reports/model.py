from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Any, Mapping, Optional

from ..common.datetime_utils import to_calendar_date
from ..core.enums import ReportStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkReportEntry:
    """A daily work report submitted by an employee (read-only here)."""

    report_id: str
    employee_id: str
    report_date: date
    status: ReportStatus
    title: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any], *, tz: Optional[tzinfo] = None) -> Optional["WorkReportEntry"]:
        report_id = str(doc.get("id") or doc.get("_id") or "")
        report_date = to_calendar_date(doc.get("date"), tz=tz)
        if report_date is None:
            logger.warning("[work-report] skip report id=%s: unparsable date %r", report_id, doc.get("date"))
            return None

        status = ReportStatus.parse(doc.get("status"))
        if status is None:
            logger.warning("[work-report] skip report id=%s: unknown status %r", report_id, doc.get("status"))
            return None

        return cls(
            report_id=report_id,
            employee_id=str(doc.get("employeeId") or doc.get("employee_id") or ""),
            report_date=report_date,
            status=status,
            title=doc.get("title"),
        )


def coerce_report_entries(items, *, tz: Optional[tzinfo] = None) -> list[WorkReportEntry]:
    """Accept entries or raw documents; malformed documents are dropped."""
    out: list[WorkReportEntry] = []
    for item in items or ():
        if isinstance(item, WorkReportEntry):
            out.append(item)
        elif isinstance(item, Mapping):
            entry = WorkReportEntry.from_document(item, tz=tz)
            if entry is not None:
                out.append(entry)
        else:
            logger.warning("[work-report] skip unsupported record type %s", type(item).__name__)
    return out
