from datetime import date, timedelta

from src.hr_system.hr_system.analytics.distribution import DistributionAggregator
from src.hr_system.hr_system.core.enums import AttendanceStatus, ReportStatus
from src.hr_system.hr_system.periods.window import CalendarWindow
from src.hr_system.hr_system.timesheet.matcher import RecordMatcher

APRIL = CalendarWindow.for_month(2025, 4)


def _days(attendance=(), reports=(), window=APRIL):
    return RecordMatcher(list(attendance), list(reports)).match_all(window)


def test_attendance_distribution_counts_statuses_and_less_worked(make_attendance):
    attendance = [
        make_attendance(date(2025, 4, 1), AttendanceStatus.PRESENT, minutes=540),
        make_attendance(date(2025, 4, 2), AttendanceStatus.PRESENT, minutes=360),
        make_attendance(date(2025, 4, 3), AttendanceStatus.LATE, minutes=500),
        make_attendance(date(2025, 4, 4), AttendanceStatus.LEAVE, minutes=None),
    ]

    dist = DistributionAggregator().attendance(_days(attendance))

    assert dist.series() == {"Present": 2, "Late": 1, "Leave": 1, "Less Worked": 2}
    assert dist.total_entries == 4
    assert dist.counts()["Absent"] == 0
    assert "Absent" not in dist.series()


def test_status_counts_sum_to_matched_entries(make_attendance):
    statuses = list(AttendanceStatus)
    attendance = [make_attendance(date(2025, 4, 1) + timedelta(days=i), s) for i, s in enumerate(statuses)]

    dist = DistributionAggregator().attendance(_days(attendance))

    assert sum(c for label, c in dist.counts().items() if label != "Less Worked") == len(statuses)


def test_report_distribution_fills_not_submitted(make_report):
    reports = [
        make_report(date(2025, 4, 1), ReportStatus.APPROVED),
        make_report(date(2025, 4, 2), ReportStatus.APPROVED),
        make_report(date(2025, 4, 3), ReportStatus.PENDING),
        make_report(date(2025, 4, 4), ReportStatus.REJECTED),
    ]

    dist = DistributionAggregator().reports(_days(reports=reports))

    assert dist.series() == {"Approved": 2, "Pending": 1, "Rejected": 1, "Not Submitted": 26}
    assert dist.approved + dist.pending + dist.rejected + dist.not_submitted == 30


def test_approved_report_without_attendance_counts_as_approved(make_report):
    dist = DistributionAggregator().reports(_days(reports=[make_report(date(2025, 4, 9))]))

    assert dist.approved == 1


def test_productivity_percentages_are_floored_independently(make_report):
    reports = [
        make_report(date(2025, 4, 1), ReportStatus.APPROVED),
        make_report(date(2025, 4, 2), ReportStatus.PENDING),
        make_report(date(2025, 4, 3), ReportStatus.REJECTED),
    ]
    agg = DistributionAggregator()

    prod = agg.productivity(agg.reports(_days(reports=reports)))

    assert (prod.productive, prod.average, prod.low) == (33, 33, 33)
    assert sum(prod.counts().values()) == 99


def test_productivity_without_reports_is_empty():
    agg = DistributionAggregator()

    prod = agg.productivity(agg.reports(_days()))

    assert prod.counts() == {"Productive": 0, "Average": 0, "Low": 0}
    assert prod.series() == {}


def test_empty_month_gives_empty_series():
    dists = DistributionAggregator().aggregate(_days())

    assert dists.to_dict() == {
        "attendance": {},
        "work_reports": {"Not Submitted": 30},
        "productivity": {},
    }
