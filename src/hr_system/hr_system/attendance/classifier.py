from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import minutes_between
from ..core.constants import DEFAULT_REQUIRED_WORK_MINUTES
from ..core.enums import AttendanceStatus
from .model import AttendanceEntry


@dataclass(frozen=True)
class AttendanceClassification:
    status: AttendanceStatus
    worked_minutes: Optional[int]
    less_worked: bool
    is_valid: bool


class AttendanceClassifier:
    """Label an entry with its stored status and the derived duration flags.

    ``less_worked`` is independent of the status: a Present day can also be
    less-worked. A check-out before the check-in yields a negative duration and
    therefore counts as less-worked.
    """

    def __init__(self, *, required_minutes: int = DEFAULT_REQUIRED_WORK_MINUTES):
        self._required_minutes = int(required_minutes)

    @property
    def required_minutes(self) -> int:
        return self._required_minutes

    def worked_minutes(self, entry: AttendanceEntry) -> Optional[int]:
        if entry.check_in is None or entry.check_out is None:
            return None
        return minutes_between(entry.check_in, entry.check_out)

    def classify(self, entry: AttendanceEntry) -> AttendanceClassification:
        minutes = self.worked_minutes(entry)
        less_worked = minutes is not None and minutes < self._required_minutes
        is_valid = (
            entry.status == AttendanceStatus.PRESENT
            and minutes is not None
            and minutes >= self._required_minutes
        )
        return AttendanceClassification(
            status=entry.status,
            worked_minutes=minutes,
            less_worked=less_worked,
            is_valid=is_valid,
        )
