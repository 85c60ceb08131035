from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional
from zoneinfo import ZoneInfo

from .analytics.distribution import DistributionAggregator
from .attendance.classifier import AttendanceClassifier
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .core.constants import DEFAULT_TIMESHEET_PAGE_SIZE, DEFAULT_WEEK_STARTS_ON
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.memory_profile_repository import InMemoryPayrollProfileRepository
from .payroll.model import PayrollPolicy
from .payroll.service import PayrollReportService
from .reports.memory_report_repository import InMemoryWorkReportRepository
from .timesheet.service import TimesheetService


@dataclass(frozen=True)
class Container:
    attendance_repo: InMemoryAttendanceRepository
    reports_repo: InMemoryWorkReportRepository
    profiles_repo: InMemoryPayrollProfileRepository

    policy: PayrollPolicy
    week_starts_on: int

    payroll_report_service: PayrollReportService
    timesheet_service: TimesheetService


def build_container(*, settings: Any = None, seed: Optional[Mapping[str, Any]] = None) -> Container:
    """Wire repositories and services.

    ``seed`` is a document snapshot: ``{"attendance": [...], "workReports": [...], "payroll": [...]}``.
    """
    seed = seed or {}
    policy = PayrollPolicy.from_settings(settings)
    week_starts_on = int(getattr(settings, "WEEK_STARTS_ON", DEFAULT_WEEK_STARTS_ON))
    page_size = int(getattr(settings, "TIMESHEET_PAGE_SIZE", DEFAULT_TIMESHEET_PAGE_SIZE))
    tz_name = getattr(settings, "TIMEZONE", None)
    tz = ZoneInfo(tz_name) if tz_name else None

    attendance_repo = InMemoryAttendanceRepository(seed.get("attendance", []))
    reports_repo = InMemoryWorkReportRepository(seed.get("workReports", []))
    profiles_repo = InMemoryPayrollProfileRepository(seed.get("payroll", []))

    classifier = AttendanceClassifier(required_minutes=policy.required_work_minutes)
    payroll_report_service = PayrollReportService(
        attendance_repo,
        reports_repo,
        profiles_repo,
        calculator=StandardPayrollCalculator(policy),
        classifier=classifier,
        aggregator=DistributionAggregator(),
        tz=tz,
    )
    timesheet_service = TimesheetService(
        attendance_repo,
        reports_repo,
        classifier=classifier,
        page_size=page_size,
        tz=tz,
    )

    return Container(
        attendance_repo=attendance_repo,
        reports_repo=reports_repo,
        profiles_repo=profiles_repo,
        policy=policy,
        week_starts_on=week_starts_on,
        payroll_report_service=payroll_report_service,
        timesheet_service=timesheet_service,
    )
