from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...periods.window import CalendarWindow
from ...timesheet.model import MatchedDay
from ..model import PayrollProfile, PayrollSummary


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def reconcile(self, *, window: CalendarWindow, days: Sequence[MatchedDay], profile: PayrollProfile) -> PayrollSummary:
        raise NotImplementedError
