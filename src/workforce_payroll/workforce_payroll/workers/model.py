from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from ..core.enums import AmountType, PaymentType

CompanyRef = Union[int, str, Mapping[str, Any], None]


def company_ref(company: CompanyRef) -> Optional[str]:
    """Company id whether it is stored as an embedded object or a bare reference."""
    if company is None:
        return None
    if isinstance(company, Mapping):
        inner = company.get("id", company.get("_id"))
        return str(inner) if inner not in (None, "") else None
    text = str(company).strip()
    return text or None


@dataclass(frozen=True)
class PayItem:
    """A named allowance or individual deduction: flat amount or percent of gross."""

    name: str
    amount: Decimal
    type: AmountType = AmountType.FIXED


@dataclass(frozen=True)
class Worker:
    worker_id: int
    company: CompanyRef
    payment_type: PaymentType
    full_name: str = ""
    project_id: Optional[int] = None
    worker_group_id: Optional[int] = None
    job_band_id: Optional[int] = None
    hourly_rate: Decimal = Decimal("0")
    monthly_salary: Decimal = Decimal("0")
    allowances: tuple[PayItem, ...] = field(default_factory=tuple)
    deductions: tuple[PayItem, ...] = field(default_factory=tuple)
    is_active: bool = True

    @property
    def company_id(self) -> Optional[str]:
        return company_ref(self.company)

    @property
    def is_monthly(self) -> bool:
        return self.payment_type == PaymentType.MONTHLY_SALARY
