from datetime import date, datetime

from src.hr_system.hr_system.attendance.classifier import AttendanceClassifier
from src.hr_system.hr_system.attendance.model import AttendanceEntry
from src.hr_system.hr_system.core.enums import AttendanceStatus


def test_present_six_hours_is_less_worked_but_keeps_status(make_attendance):
    entry = make_attendance(date(2025, 4, 1), minutes=360)

    result = AttendanceClassifier().classify(entry)

    assert result.status == AttendanceStatus.PRESENT
    assert result.worked_minutes == 360
    assert result.less_worked is True
    assert result.is_valid is False


def test_exactly_required_minutes_is_valid(make_attendance):
    entry = make_attendance(date(2025, 4, 1), minutes=525)

    result = AttendanceClassifier().classify(entry)

    assert result.less_worked is False
    assert result.is_valid is True


def test_one_minute_short_is_less_worked(make_attendance):
    result = AttendanceClassifier().classify(make_attendance(date(2025, 4, 1), minutes=524))

    assert result.less_worked is True
    assert result.is_valid is False


def test_less_worked_applies_to_any_status(make_attendance):
    result = AttendanceClassifier().classify(make_attendance(date(2025, 4, 1), AttendanceStatus.LATE, minutes=200))

    assert result.status == AttendanceStatus.LATE
    assert result.less_worked is True
    assert result.is_valid is False


def test_long_late_day_is_not_valid(make_attendance):
    result = AttendanceClassifier().classify(make_attendance(date(2025, 4, 1), AttendanceStatus.LATE, minutes=600))

    assert result.less_worked is False
    assert result.is_valid is False


def test_missing_checkout_is_neither_less_worked_nor_valid(make_attendance):
    entry = AttendanceEntry(
        entry_id="a1",
        employee_id="E1",
        work_date=date(2025, 4, 1),
        status=AttendanceStatus.PRESENT,
        check_in=datetime(2025, 4, 1, 9, 0),
        check_out=None,
    )

    result = AttendanceClassifier().classify(entry)

    assert result.worked_minutes is None
    assert result.less_worked is False
    assert result.is_valid is False


def test_checkout_before_checkin_counts_as_less_worked():
    entry = AttendanceEntry(
        entry_id="a1",
        employee_id="E1",
        work_date=date(2025, 4, 1),
        status=AttendanceStatus.PRESENT,
        check_in=datetime(2025, 4, 1, 18, 0),
        check_out=datetime(2025, 4, 1, 9, 0),
    )

    result = AttendanceClassifier().classify(entry)

    assert result.worked_minutes < 0
    assert result.less_worked is True
    assert result.is_valid is False


def test_threshold_is_configurable(make_attendance):
    classifier = AttendanceClassifier(required_minutes=480)

    assert classifier.classify(make_attendance(date(2025, 4, 1), minutes=480)).is_valid is True
