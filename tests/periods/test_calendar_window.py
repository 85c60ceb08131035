from datetime import date, datetime

import pytest

from src.hr_system.hr_system.core.enums import ViewMode
from src.hr_system.hr_system.core.exceptions import ValidationError
from src.hr_system.hr_system.periods.window import CalendarWindow


def test_month_window_covers_whole_month_from_any_anchor():
    for anchor in (date(2025, 2, 1), date(2025, 2, 14), date(2025, 2, 28)):
        days = CalendarWindow.around(anchor, "month").days()
        assert days[0] == date(2025, 2, 1)
        assert days[-1] == date(2025, 2, 28)
        assert len(days) == 28


def test_month_window_in_leap_year():
    assert len(CalendarWindow.for_month(2024, 2)) == 29


def test_week_window_starts_on_monday_by_default():
    window = CalendarWindow.around(date(2025, 4, 17), ViewMode.WEEK)  # Thursday

    assert window.start == date(2025, 4, 14)
    assert window.end == date(2025, 4, 20)
    assert len(window.days()) == 7


def test_week_window_can_start_on_sunday():
    window = CalendarWindow.around(date(2025, 4, 17), ViewMode.WEEK, week_starts_on=6)

    assert window.start == date(2025, 4, 13)
    assert window.end == date(2025, 4, 19)


def test_days_are_ordered_and_contiguous():
    days = CalendarWindow.for_month(2025, 3).days()

    assert all((b - a).days == 1 for a, b in zip(days, days[1:]))


def test_step_month_preserves_day_of_month():
    window = CalendarWindow.around(date(2025, 3, 15), "month")

    assert window.next().anchor == date(2025, 4, 15)
    assert window.previous().anchor == date(2025, 2, 15)


def test_step_month_clamps_to_month_end():
    window = CalendarWindow.around(date(2025, 1, 31), "month")

    assert window.next().anchor == date(2025, 2, 28)
    assert window.next().days()[-1] == date(2025, 2, 28)


def test_step_week_moves_seven_days():
    window = CalendarWindow.around(date(2025, 4, 17), "week")

    assert window.next().anchor == date(2025, 4, 24)
    assert window.step(-2).start == date(2025, 3, 31)


def test_month_step_crosses_year():
    assert CalendarWindow.for_month(2024, 12).next().start == date(2025, 1, 1)


def test_reference_may_be_datetime_or_string():
    assert CalendarWindow.around(datetime(2025, 4, 17, 23, 30), "month").start == date(2025, 4, 1)
    assert CalendarWindow.around("2025-04-17", "month").end == date(2025, 4, 30)


def test_custom_window_is_inclusive_and_does_not_step():
    window = CalendarWindow.custom(date(2025, 4, 28), date(2025, 5, 2))

    assert window.days() == [date(2025, 4, 28), date(2025, 4, 29), date(2025, 4, 30), date(2025, 5, 1), date(2025, 5, 2)]
    assert window.next() is window


def test_custom_window_end_before_start_raises():
    with pytest.raises(ValidationError):
        CalendarWindow.custom(date(2025, 4, 2), date(2025, 4, 1))


def test_unknown_mode_raises():
    with pytest.raises(ValidationError):
        CalendarWindow.around(date(2025, 4, 2), "year")


def test_contains_and_label():
    window = CalendarWindow.for_month(2025, 3)

    assert date(2025, 3, 31) in window
    assert date(2025, 4, 1) not in window
    assert datetime(2025, 3, 31, 23, 30) in window
    assert datetime(2025, 4, 1, 0, 0) not in window
    assert window.label() == "Mar 1 - Mar 31, 2025"
