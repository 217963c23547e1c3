from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import InstallmentStatus, LoanCategory, LoanStatus


@dataclass(frozen=True)
class Installment:
    number: int
    due_date: date
    amount: Decimal
    paid_amount: Decimal = Decimal("0")
    status: InstallmentStatus = InstallmentStatus.PENDING


@dataclass(frozen=True)
class Loan:
    loan_id: int
    loan_code: str
    worker_id: int
    category: LoanCategory
    remaining_amount: Decimal
    status: LoanStatus = LoanStatus.ACTIVE
    installment_amount: Optional[Decimal] = None
    installments: tuple[Installment, ...] = field(default_factory=tuple)
    description: Optional[str] = None

    @property
    def label(self) -> str:
        if self.description:
            return self.description
        return "Salary Advance" if self.category == LoanCategory.ADVANCE else "Loan Repayment"


@dataclass(frozen=True)
class ScheduledRepayment:
    """What a loan asks to be deducted this period, before capping at the balance."""

    loan_id: int
    loan_code: str
    category: LoanCategory
    description: str
    amount: Decimal
    remaining_balance: Decimal
