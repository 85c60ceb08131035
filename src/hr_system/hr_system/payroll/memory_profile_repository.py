from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional


class InMemoryPayrollProfileRepository:
    def __init__(self, documents: Iterable[Mapping[str, Any]] = ()):
        self._by_employee: dict[str, dict] = {}
        for doc in documents:
            employee_id = str(doc.get("employeeId") or doc.get("employee_id") or "")
            self._by_employee[employee_id] = dict(doc)

    def get_for_employee(self, employee_id: str) -> Optional[Mapping[str, Any]]:
        return self._by_employee.get(str(employee_id))
