from __future__ import annotations

from datetime import date
from decimal import Decimal

from ..core.enums import InstallmentStatus, LoanCategory, LoanStatus
from .model import Loan, ScheduledRepayment
from .repository import LoanRepository


def scheduled_amount(loan: Loan, period_end: date) -> Decimal:
    """Amount this loan asks for in a period ending on ``period_end``.

    With an installment schedule: the first pending installment due by the
    period end, less what was already paid on it. Without one: advances are
    recovered in full, loans use their fixed installment or the remaining balance.
    """
    if loan.installments:
        for inst in loan.installments:
            if inst.status == InstallmentStatus.PENDING and inst.due_date <= period_end:
                return inst.amount - inst.paid_amount
        return Decimal("0")

    if loan.category == LoanCategory.ADVANCE:
        return loan.remaining_amount
    return loan.installment_amount or loan.remaining_amount


def repayments_due(loans, period_end: date) -> list[ScheduledRepayment]:
    out: list[ScheduledRepayment] = []
    for loan in loans:
        if loan.status != LoanStatus.ACTIVE or loan.remaining_amount <= 0:
            continue
        amount = scheduled_amount(loan, period_end)
        if amount <= 0:
            continue
        out.append(
            ScheduledRepayment(
                loan_id=loan.loan_id,
                loan_code=loan.loan_code,
                category=loan.category,
                description=loan.label,
                amount=amount,
                remaining_balance=loan.remaining_amount,
            )
        )
    return out


class LoanService:
    def __init__(self, loans: LoanRepository):
        self._loans = loans

    def repayments_for(self, worker_id: int, period_end: date) -> list[ScheduledRepayment]:
        return repayments_due(self._loans.list_active_for_worker(worker_id), period_end)
