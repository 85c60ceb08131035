from __future__ import annotations

from collections import defaultdict
from typing import Any, Iterable, Mapping, Sequence


class InMemoryAttendanceRepository:
    """Document-store stand-in keyed by employee id."""

    def __init__(self, documents: Iterable[Mapping[str, Any]] = ()):
        self._by_employee: dict[str, list[dict]] = defaultdict(list)
        for doc in documents:
            self.add(doc)

    def add(self, doc: Mapping[str, Any]) -> None:
        employee_id = str(doc.get("employeeId") or doc.get("employee_id") or "")
        self._by_employee[employee_id].append(dict(doc))

    def list_for_employee(self, employee_id: str) -> Sequence[Mapping[str, Any]]:
        return list(self._by_employee.get(str(employee_id), []))
