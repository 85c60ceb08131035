from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence


class WorkReportRepository(Protocol):
    def list_for_employee(self, employee_id: str) -> Sequence[Mapping[str, Any]]:
        raise NotImplementedError
