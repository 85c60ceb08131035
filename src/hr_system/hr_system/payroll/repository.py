from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class PayrollProfileRepository(Protocol):
    def get_for_employee(self, employee_id: str) -> Optional[Mapping[str, Any]]:
        raise NotImplementedError
