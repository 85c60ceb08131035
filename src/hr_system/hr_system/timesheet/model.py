from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.classifier import AttendanceClassification
from ..attendance.model import AttendanceEntry
from ..core.enums import CompletionStatus, ReportStatus
from ..reports.model import WorkReportEntry


@dataclass(frozen=True)
class MatchedDay:
    """One calendar day bound to its (optional) attendance entry and work report."""

    day: date
    attendance: Optional[AttendanceEntry] = None
    report: Optional[WorkReportEntry] = None
    classification: Optional[AttendanceClassification] = None

    @property
    def is_valid_attendance(self) -> bool:
        return bool(self.classification and self.classification.is_valid)

    @property
    def has_approved_report(self) -> bool:
        return self.report is not None and self.report.status == ReportStatus.APPROVED


@dataclass(frozen=True)
class TimesheetRow:
    date: str
    day: str
    status: str
    worked_minutes: int
    hours_display: str
    is_recorded: bool
    has_work_report: bool
    work_report_status: Optional[str]
    completion_status: CompletionStatus
    css_class: str
    check_in: str = "-"
    check_out: str = "-"
    has_check_pair: bool = False

    @property
    def hours_worked(self) -> float:
        return self.worked_minutes / 60

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "day": self.day,
            "status": self.status,
            "check_in": self.check_in,
            "check_out": self.check_out,
            "hours_worked": round(self.hours_worked, 2),
            "hours_display": self.hours_display,
            "is_recorded": self.is_recorded,
            "has_work_report": self.has_work_report,
            "work_report_status": self.work_report_status,
            "completion_status": self.completion_status.value,
            "css_class": self.css_class,
        }


@dataclass(frozen=True)
class TimesheetFilters:
    """UI filters; "all" (or empty) disables a filter."""

    status: str = "all"
    weekday: str = "all"
    search: str = ""
    work_time: str = "all"


@dataclass(frozen=True)
class TimesheetTotals:
    present_days: int
    absent_days: int
    total_hours: float
    completed_days: int
    completion_rate: int


@dataclass(frozen=True)
class WorkingDaysSummary:
    working_days: int
    week_offs: int
    absent_days: int


@dataclass(frozen=True)
class TimesheetPage:
    label: str
    rows: list[TimesheetRow]
    totals: TimesheetTotals
    page: int
    total_pages: int
    total_rows: int
    filters: TimesheetFilters = field(default_factory=TimesheetFilters)
