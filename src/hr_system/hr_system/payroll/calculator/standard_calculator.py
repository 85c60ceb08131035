from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...common.datetime_utils import days_in_month
from ...common.math_utils import percent_round
from ...common.validators import coerce_amount
from ...core.enums import ViewMode
from ...core.exceptions import ValidationError
from ...periods.window import CalendarWindow
from ...timesheet.model import MatchedDay
from ..model import PayrollPolicy, PayrollProfile, PayrollSummary
from .base import PayrollCalculator

logger = logging.getLogger(__name__)


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: pay valid days plus the flat leave allowance, capped at the month.

    A valid day has sufficient Present attendance *and* an approved work report.
    Every calendar day of the month is a working day.
    """

    def __init__(self, policy: Optional[PayrollPolicy] = None):
        self._policy = policy or PayrollPolicy()

    @property
    def policy(self) -> PayrollPolicy:
        return self._policy

    def reconcile(self, *, window: CalendarWindow, days: Sequence[MatchedDay], profile: PayrollProfile) -> PayrollSummary:
        if window.mode != ViewMode.MONTH:
            raise ValidationError("Payroll is reconciled per calendar month")

        year, month = window.start.year, window.start.month
        total_days = days_in_month(year, month)

        valid_attendance = {d.day for d in days if d.day in window and d.is_valid_attendance}
        approved_reports = {d.day for d in days if d.day in window and d.has_approved_report}
        valid_days = len(valid_attendance & approved_reports)

        total_working_days = total_days
        paid_days = min(valid_days + self._policy.paid_leave_allowance_days, total_working_days)

        salary = coerce_amount(profile.monthly_salary)
        if salary > 0:
            daily_rate = salary / total_days
            earnings = paid_days * daily_rate
            # float rounding can leave a tiny negative at a fully paid month
            deductions = max(salary - earnings, 0.0)
        else:
            daily_rate = earnings = deductions = 0.0

        logger.debug(
            "[payroll] employee=%s %04d-%02d valid=%s paid=%s earnings=%.2f",
            profile.employee_id, year, month, valid_days, paid_days, earnings,
        )

        return PayrollSummary(
            month=month,
            year=year,
            daily_rate=daily_rate,
            valid_days=valid_days,
            paid_days=paid_days,
            total_working_days=total_working_days,
            earnings=earnings,
            deductions=deductions,
            employee_id=profile.employee_id,
            monthly_salary=salary,
            compliance_rate=percent_round(valid_days, total_days),
        )
