from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from ..common.validators import coerce_amount
from ..core.constants import DEFAULT_PAID_LEAVE_ALLOWANCE_DAYS, DEFAULT_REQUIRED_WORK_MINUTES


@dataclass(frozen=True)
class PayrollPolicy:
    """Payroll rules; defaults are the current company policy."""

    required_work_minutes: int = DEFAULT_REQUIRED_WORK_MINUTES
    paid_leave_allowance_days: int = DEFAULT_PAID_LEAVE_ALLOWANCE_DAYS

    @classmethod
    def from_settings(cls, settings: Any) -> "PayrollPolicy":
        return cls(
            required_work_minutes=int(getattr(settings, "REQUIRED_WORK_MINUTES", DEFAULT_REQUIRED_WORK_MINUTES)),
            paid_leave_allowance_days=int(getattr(settings, "PAID_LEAVE_ALLOWANCE_DAYS", DEFAULT_PAID_LEAVE_ALLOWANCE_DAYS)),
        )


@dataclass(frozen=True)
class PayrollProfile:
    employee_id: str
    monthly_salary: float = 0.0

    @classmethod
    def from_document(cls, doc: Optional[Mapping[str, Any]], *, employee_id: str = "") -> "PayrollProfile":
        if not doc:
            return cls(employee_id=str(employee_id))
        salary = doc.get("monthlySalary", doc.get("monthly_salary", doc.get("baseSalary")))
        return cls(
            employee_id=str(doc.get("employeeId") or doc.get("employee_id") or employee_id),
            monthly_salary=coerce_amount(salary),
        )


@dataclass(frozen=True)
class PayrollSummary:
    month: int
    year: int
    daily_rate: float
    valid_days: int
    paid_days: int
    total_working_days: int
    earnings: float
    deductions: float
    employee_id: str = ""
    monthly_salary: float = 0.0
    compliance_rate: int = 0

    def to_dict(self) -> dict:
        return asdict(self)
