from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Any, Iterable, Mapping, Optional, Union

from ..analytics.distribution import DistributionAggregator, Distributions
from ..attendance.classifier import AttendanceClassifier
from ..attendance.model import AttendanceEntry, coerce_attendance_entries
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_non_empty
from ..periods.window import CalendarWindow
from ..reports.model import WorkReportEntry, coerce_report_entries
from ..reports.repository import WorkReportRepository
from ..timesheet.matcher import RecordMatcher
from ..timesheet.model import MatchedDay
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollProfile, PayrollSummary
from .repository import PayrollProfileRepository

logger = logging.getLogger(__name__)

AttendanceInput = Iterable[Union[AttendanceEntry, Mapping[str, Any]]]
ReportInput = Iterable[Union[WorkReportEntry, Mapping[str, Any]]]


@dataclass(frozen=True)
class PayrollReport:
    summary: PayrollSummary
    distributions: Distributions
    days: list[MatchedDay]
    duplicate_dates: frozenset[date] = frozenset()

    def to_dict(self) -> dict:
        return {
            "summary": self.summary.to_dict(),
            "distributions": self.distributions.to_dict(),
        }


def compute_monthly_report(
    *,
    window: CalendarWindow,
    attendance: AttendanceInput,
    reports: ReportInput,
    profile: Optional[PayrollProfile],
    calculator: Optional[PayrollCalculator] = None,
    classifier: Optional[AttendanceClassifier] = None,
    aggregator: Optional[DistributionAggregator] = None,
    tz: Optional[tzinfo] = None,
) -> PayrollReport:
    """Pure month computation over already-fetched records.

    Records may be entries or raw documents; documents that cannot be parsed
    are left out. A missing profile pays nothing.
    """
    calculator = calculator or StandardPayrollCalculator()
    if classifier is None:
        policy = getattr(calculator, "policy", None)
        classifier = AttendanceClassifier(required_minutes=policy.required_work_minutes) if policy else AttendanceClassifier()
    aggregator = aggregator or DistributionAggregator()

    matcher = RecordMatcher(
        coerce_attendance_entries(attendance, tz=tz),
        coerce_report_entries(reports, tz=tz),
        classifier=classifier,
    )
    days = matcher.match_all(window)
    if matcher.duplicate_dates:
        logger.warning(
            "[payroll] duplicate records on %s; first match kept",
            ", ".join(sorted(d.isoformat() for d in matcher.duplicate_dates)),
        )

    profile = profile or PayrollProfile(employee_id="")
    summary = calculator.reconcile(window=window, days=days, profile=profile)
    return PayrollReport(
        summary=summary,
        distributions=aggregator.aggregate(days),
        days=days,
        duplicate_dates=matcher.duplicate_dates,
    )


class PayrollReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        reports: WorkReportRepository,
        profiles: PayrollProfileRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        classifier: Optional[AttendanceClassifier] = None,
        aggregator: Optional[DistributionAggregator] = None,
        tz: Optional[tzinfo] = None,
    ):
        self._attendance = attendance
        self._reports = reports
        self._profiles = profiles
        self._calculator = calculator or StandardPayrollCalculator()
        self._classifier = classifier
        self._aggregator = aggregator or DistributionAggregator()
        self._tz = tz

    def build_monthly_report(self, employee_id: str, *, year: int, month: int) -> PayrollReport:
        employee_id = require_non_empty(str(employee_id), "employee_id")
        window = CalendarWindow.for_month(year, month)
        profile = PayrollProfile.from_document(self._profiles.get_for_employee(employee_id), employee_id=employee_id)

        return compute_monthly_report(
            window=window,
            attendance=self._attendance.list_for_employee(employee_id),
            reports=self._reports.list_for_employee(employee_id),
            profile=profile,
            calculator=self._calculator,
            classifier=self._classifier,
            aggregator=self._aggregator,
            tz=self._tz,
        )

    def build_report_for_date(self, employee_id: str, reference: date) -> PayrollReport:
        return self.build_monthly_report(employee_id, year=reference.year, month=reference.month)
