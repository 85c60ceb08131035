from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from src.hr_system.hr_system.attendance.model import AttendanceEntry
from src.hr_system.hr_system.core.enums import AttendanceStatus, ReportStatus
from src.hr_system.hr_system.reports.model import WorkReportEntry


@pytest.fixture
def fixed_now():
    return datetime(2025, 4, 15, 9, 0, 0)


@pytest.fixture
def make_attendance():
    counter = {"n": 0}

    def _make(day: date, status=AttendanceStatus.PRESENT, *, minutes: int | None = 540, start=time(9, 0), employee_id="E1"):
        counter["n"] += 1
        check_in = check_out = None
        if minutes is not None:
            check_in = datetime.combine(day, start)
            check_out = check_in + timedelta(minutes=minutes)
        return AttendanceEntry(
            entry_id=f"a{counter['n']}",
            employee_id=employee_id,
            work_date=day,
            status=status,
            check_in=check_in,
            check_out=check_out,
        )

    return _make


@pytest.fixture
def make_report():
    counter = {"n": 0}

    def _make(day: date, status=ReportStatus.APPROVED, *, employee_id="E1"):
        counter["n"] += 1
        return WorkReportEntry(report_id=f"r{counter['n']}", employee_id=employee_id, report_date=day, status=status)

    return _make
