from datetime import date, datetime

import pytest

from src.hr_system.hr_system.attendance.model import AttendanceEntry, coerce_attendance_entries
from src.hr_system.hr_system.core.enums import AttendanceStatus


def test_from_document_reads_camel_case_fields():
    entry = AttendanceEntry.from_document(
        {
            "_id": "abc",
            "employeeId": "E7",
            "date": "2025-04-03T00:00:00",
            "status": "Present",
            "checkIn": "2025-04-03T09:00:00",
            "checkOut": "2025-04-03T18:00:00",
        }
    )

    assert entry.entry_id == "abc"
    assert entry.employee_id == "E7"
    assert entry.work_date == date(2025, 4, 3)
    assert entry.status == AttendanceStatus.PRESENT
    assert entry.check_in == datetime(2025, 4, 3, 9, 0)
    assert entry.check_out == datetime(2025, 4, 3, 18, 0)


def test_from_document_accepts_status_spellings():
    half = AttendanceEntry.from_document({"date": "2025-04-03", "status": "Half-Day"})
    early = AttendanceEntry.from_document({"date": "2025-04-03", "status": "early_departure"})

    assert half.status == AttendanceStatus.HALF_DAY
    assert early.status == AttendanceStatus.EARLY_DEPARTURE


def test_unparsable_date_is_dropped():
    assert AttendanceEntry.from_document({"date": "not-a-date", "status": "Present"}) is None
    assert AttendanceEntry.from_document({"status": "Present"}) is None


def test_unknown_status_is_dropped():
    assert AttendanceEntry.from_document({"date": "2025-04-03", "status": "Holiday"}) is None


def test_unparsable_checkout_is_treated_as_missing():
    entry = AttendanceEntry.from_document(
        {"date": "2025-04-03", "status": "Present", "checkIn": "2025-04-03T09:00:00", "checkOut": "garbage"}
    )

    assert entry is not None
    assert entry.check_out is None


@pytest.mark.parametrize("hours", ["NaN", float("inf"), "-inf"])
def test_non_finite_hours_worked_is_ignored(hours):
    entry = AttendanceEntry.from_document({"date": "2025-04-03", "status": "Present", "hoursWorked": hours})

    assert entry is not None
    assert entry.hours_worked is None


def test_coerce_mixes_entries_and_documents(make_attendance):
    existing = make_attendance(date(2025, 4, 1))
    items = [existing, {"date": "2025-04-02", "status": "Absent"}, {"date": "??", "status": "Absent"}, 42]

    out = coerce_attendance_entries(items)

    assert [e.work_date for e in out] == [date(2025, 4, 1), date(2025, 4, 2)]
    assert out[0] is existing


def test_coerce_handles_none():
    assert coerce_attendance_entries(None) == []
