from __future__ import annotations

import math
from datetime import tzinfo
from typing import Optional, Sequence

from ..attendance.classifier import AttendanceClassifier
from ..attendance.model import coerce_attendance_entries
from ..attendance.repository import AttendanceRepository
from ..common.math_utils import percent_round
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_TIMESHEET_PAGE_SIZE
from ..core.enums import AttendanceStatus, CompletionStatus, ReportStatus, ViewMode, WorkTimeBucket
from ..core.exceptions import ValidationError
from ..periods.window import CalendarWindow
from ..reports.model import coerce_report_entries
from ..reports.repository import WorkReportRepository
from .matcher import RecordMatcher
from .model import (
    MatchedDay,
    TimesheetFilters,
    TimesheetPage,
    TimesheetRow,
    TimesheetTotals,
    WorkingDaysSummary,
)

_CSS = {
    CompletionStatus.COMPLETED: "bg-success",
    CompletionStatus.PARTIALLY_COMPLETED: "bg-info",
    CompletionStatus.PENDING_APPROVAL: "bg-warning text-dark",
    CompletionStatus.REJECTED: "bg-danger",
    CompletionStatus.WORKED_NO_REPORT: "bg-primary",
    CompletionStatus.INCOMPLETE: "bg-secondary",
    CompletionStatus.NOT_COMPLETED: "bg-secondary",
}


class TimesheetService:
    """Day-by-day timesheet view for one employee over a calendar window."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        reports: WorkReportRepository,
        *,
        classifier: Optional[AttendanceClassifier] = None,
        page_size: int = DEFAULT_TIMESHEET_PAGE_SIZE,
        tz: Optional[tzinfo] = None,
    ):
        self._attendance = attendance
        self._reports = reports
        self._classifier = classifier or AttendanceClassifier()
        self._page_size = max(int(page_size), 1)
        self._tz = tz

    def match_window(self, employee_id: str, window: CalendarWindow) -> list[MatchedDay]:
        employee_id = require_non_empty(str(employee_id), "employee_id")
        entries = coerce_attendance_entries(self._attendance.list_for_employee(employee_id), tz=self._tz)
        reports = coerce_report_entries(self._reports.list_for_employee(employee_id), tz=self._tz)
        matcher = RecordMatcher(entries, reports, classifier=self._classifier)
        return matcher.match_all(window)

    def build_rows(self, employee_id: str, window: CalendarWindow) -> list[TimesheetRow]:
        return [self._to_row(d) for d in self.match_window(employee_id, window)]

    def get_page(
        self,
        employee_id: str,
        window: CalendarWindow,
        *,
        filters: Optional[TimesheetFilters] = None,
        page: int = 1,
    ) -> TimesheetPage:
        filters = filters or TimesheetFilters()
        rows = self.build_rows(employee_id, window)
        filtered = self.apply_filters(rows, filters)

        total_pages = max(math.ceil(len(filtered) / self._page_size), 1)
        page = min(max(int(page), 1), total_pages)
        start = (page - 1) * self._page_size

        return TimesheetPage(
            label=window.label(),
            rows=filtered[start:start + self._page_size],
            totals=self.totals(rows),
            page=page,
            total_pages=total_pages,
            total_rows=len(filtered),
            filters=filters,
        )

    def working_days(self, employee_id: str, window: CalendarWindow) -> WorkingDaysSummary:
        """Days meeting the required duration whose report was not rejected; one week-off per 7 absences."""
        if window.mode != ViewMode.MONTH:
            raise ValidationError("Working days are summarized per calendar month")

        rows = self.build_rows(employee_id, window)
        required = self._classifier.required_minutes
        working = sum(
            1
            for r in rows
            if r.worked_minutes >= required and r.completion_status != CompletionStatus.REJECTED
        )
        absent = sum(1 for r in rows if r.status == AttendanceStatus.ABSENT.label)
        return WorkingDaysSummary(working_days=working, week_offs=absent // 7, absent_days=absent)

    def completion_status(self, matched: MatchedDay, worked_minutes: int) -> CompletionStatus:
        if matched.attendance is None:
            return CompletionStatus.NOT_COMPLETED

        enough = worked_minutes >= self._classifier.required_minutes
        report = matched.report
        if report is None:
            return CompletionStatus.WORKED_NO_REPORT if enough else CompletionStatus.INCOMPLETE
        if report.status == ReportStatus.APPROVED:
            return CompletionStatus.COMPLETED if enough else CompletionStatus.PARTIALLY_COMPLETED
        if report.status == ReportStatus.PENDING:
            return CompletionStatus.PENDING_APPROVAL
        return CompletionStatus.REJECTED

    @staticmethod
    def apply_filters(rows: Sequence[TimesheetRow], filters: TimesheetFilters) -> list[TimesheetRow]:
        def _enabled(value: str) -> bool:
            return bool(value) and value.lower() != "all"

        if _enabled(filters.work_time):
            try:
                bucket = WorkTimeBucket(filters.work_time)
            except ValueError:
                raise ValidationError(f"Unknown work time filter: {filters.work_time}")
        else:
            bucket = None

        wanted = None
        if _enabled(filters.status):
            wanted = AttendanceStatus.parse(filters.status)
            if wanted is None:
                raise ValidationError(f"Unknown status filter: {filters.status}")

        out = []
        for r in rows:
            if wanted is not None and r.status != wanted.label:
                continue
            if _enabled(filters.weekday) and r.day.lower() != filters.weekday.lower():
                continue
            if filters.search and filters.search.strip().lower() not in r.date.lower():
                continue
            if bucket is not None:
                if not r.has_check_pair:
                    continue
                hours = r.hours_worked
                if bucket == WorkTimeBucket.LESS_THAN_4 and not hours < 4:
                    continue
                if bucket == WorkTimeBucket.FOUR_TO_EIGHT and not 4 <= hours <= 8:
                    continue
                if bucket == WorkTimeBucket.MORE_THAN_8 and not hours > 8:
                    continue
            out.append(r)
        return out

    @staticmethod
    def totals(rows: Sequence[TimesheetRow]) -> TimesheetTotals:
        completed = sum(1 for r in rows if r.completion_status == CompletionStatus.COMPLETED)
        return TimesheetTotals(
            present_days=sum(1 for r in rows if r.status == AttendanceStatus.PRESENT.label),
            absent_days=sum(1 for r in rows if r.status == AttendanceStatus.ABSENT.label),
            total_hours=round(sum(r.hours_worked for r in rows), 2),
            completed_days=completed,
            completion_rate=percent_round(completed, len(rows)),
        )

    def _to_row(self, d: MatchedDay) -> TimesheetRow:
        entry = d.attendance
        minutes = 0
        if d.classification and d.classification.worked_minutes is not None:
            minutes = d.classification.worked_minutes
        elif entry and entry.hours_worked and math.isfinite(entry.hours_worked):
            minutes = int(entry.hours_worked * 60)

        completion = self.completion_status(d, minutes)
        shown = max(minutes, 0)
        return TimesheetRow(
            date=d.day.strftime("%Y-%m-%d"),
            day=d.day.strftime("%A"),
            status=entry.status.label if entry else AttendanceStatus.ABSENT.label,
            worked_minutes=minutes,
            hours_display=f"{shown // 60}h {shown % 60}m",
            is_recorded=entry is not None,
            has_work_report=d.report is not None,
            work_report_status=d.report.status.value if d.report else None,
            completion_status=completion,
            css_class=_CSS[completion],
            check_in=entry.check_in.strftime("%H:%M") if entry and entry.check_in else "-",
            check_out=entry.check_out.strftime("%H:%M") if entry and entry.check_out else "-",
            has_check_pair=bool(d.classification and d.classification.worked_minutes is not None),
        )
