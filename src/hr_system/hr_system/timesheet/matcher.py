from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.classifier import AttendanceClassifier
from ..attendance.model import AttendanceEntry
from ..reports.model import WorkReportEntry
from .model import MatchedDay

logger = logging.getLogger(__name__)


class RecordMatcher:
    """Bind calendar days to attendance entries and work reports.

    Entries are indexed by calendar date. When an employee has more than one
    entry of a kind for the same day the first one encountered wins; the
    dates that had duplicates are kept in ``duplicate_dates``.
    """

    def __init__(
        self,
        attendance: Sequence[AttendanceEntry],
        reports: Sequence[WorkReportEntry],
        *,
        classifier: Optional[AttendanceClassifier] = None,
    ):
        self._classifier = classifier or AttendanceClassifier()
        self._duplicates: set[date] = set()
        self._attendance = self._index(attendance, key=lambda e: e.work_date, kind="attendance")
        self._reports = self._index(reports, key=lambda r: r.report_date, kind="work-report")

    def _index(self, items, *, key, kind: str) -> dict:
        out: dict = {}
        for item in items:
            day = key(item)
            if day in out:
                self._duplicates.add(day)
                logger.debug("[matcher] duplicate %s entry for %s ignored", kind, day.isoformat())
                continue
            out[day] = item
        return out

    @property
    def duplicate_dates(self) -> frozenset[date]:
        return frozenset(self._duplicates)

    def match(self, day: date) -> tuple[Optional[AttendanceEntry], Optional[WorkReportEntry]]:
        return self._attendance.get(day), self._reports.get(day)

    def match_day(self, day: date) -> MatchedDay:
        attendance, report = self.match(day)
        classification = self._classifier.classify(attendance) if attendance else None
        return MatchedDay(day=day, attendance=attendance, report=report, classification=classification)

    def match_all(self, days: Iterable[date]) -> list[MatchedDay]:
        return [self.match_day(d) for d in days]
