from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence


class AttendanceRepository(Protocol):
    def list_for_employee(self, employee_id: str) -> Sequence[Mapping[str, Any]]:
        """All stored attendance documents of one employee, unfiltered by date."""

        raise NotImplementedError
