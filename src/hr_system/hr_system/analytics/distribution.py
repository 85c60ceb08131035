from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..common.math_utils import percent_floor
from ..core.constants import (
    AVERAGE_LABEL,
    LESS_WORKED_LABEL,
    LOW_LABEL,
    NOT_SUBMITTED_LABEL,
    PRODUCTIVE_LABEL,
)
from ..core.enums import AttendanceStatus, ReportStatus
from ..timesheet.model import MatchedDay


def _rendered(counts: dict[str, int]) -> dict[str, int]:
    return {label: count for label, count in counts.items() if count > 0}


@dataclass(frozen=True)
class AttendanceDistribution:
    by_status: dict[AttendanceStatus, int]
    less_worked: int

    @property
    def total_entries(self) -> int:
        return sum(self.by_status.values())

    def counts(self) -> dict[str, int]:
        out = {status.label: self.by_status.get(status, 0) for status in AttendanceStatus}
        out[LESS_WORKED_LABEL] = self.less_worked
        return out

    def series(self) -> dict[str, int]:
        return _rendered(self.counts())


@dataclass(frozen=True)
class ReportDistribution:
    approved: int
    pending: int
    rejected: int
    not_submitted: int

    @property
    def total_reports(self) -> int:
        return self.approved + self.pending + self.rejected

    def counts(self) -> dict[str, int]:
        return {
            ReportStatus.APPROVED.value: self.approved,
            ReportStatus.PENDING.value: self.pending,
            ReportStatus.REJECTED.value: self.rejected,
            NOT_SUBMITTED_LABEL: self.not_submitted,
        }

    def series(self) -> dict[str, int]:
        return _rendered(self.counts())


@dataclass(frozen=True)
class ProductivityDistribution:
    """Floored percentages of submitted reports; not renormalized to 100."""

    productive: int
    average: int
    low: int

    def counts(self) -> dict[str, int]:
        return {PRODUCTIVE_LABEL: self.productive, AVERAGE_LABEL: self.average, LOW_LABEL: self.low}

    def series(self) -> dict[str, int]:
        return _rendered(self.counts())


@dataclass(frozen=True)
class Distributions:
    attendance: AttendanceDistribution
    reports: ReportDistribution
    productivity: ProductivityDistribution

    def to_dict(self) -> dict:
        return {
            "attendance": self.attendance.series(),
            "work_reports": self.reports.series(),
            "productivity": self.productivity.series(),
        }


class DistributionAggregator:
    def attendance(self, days: Sequence[MatchedDay]) -> AttendanceDistribution:
        by_status = {status: 0 for status in AttendanceStatus}
        less_worked = 0
        for d in days:
            if d.classification is None:
                continue
            by_status[d.classification.status] += 1
            if d.classification.less_worked:
                less_worked += 1
        return AttendanceDistribution(by_status=by_status, less_worked=less_worked)

    def reports(self, days: Sequence[MatchedDay]) -> ReportDistribution:
        tally = {status: 0 for status in ReportStatus}
        for d in days:
            if d.report is not None:
                tally[d.report.status] += 1
        submitted = sum(tally.values())
        return ReportDistribution(
            approved=tally[ReportStatus.APPROVED],
            pending=tally[ReportStatus.PENDING],
            rejected=tally[ReportStatus.REJECTED],
            not_submitted=len(days) - submitted,
        )

    def productivity(self, reports: ReportDistribution) -> ProductivityDistribution:
        total = reports.total_reports
        return ProductivityDistribution(
            productive=percent_floor(reports.approved, total),
            average=percent_floor(reports.pending, total),
            low=percent_floor(reports.rejected, total),
        )

    def aggregate(self, days: Sequence[MatchedDay]) -> Distributions:
        reports = self.reports(days)
        return Distributions(
            attendance=self.attendance(days),
            reports=reports,
            productivity=self.productivity(reports),
        )
