from datetime import date
from decimal import Decimal

from inmemory import InMemoryLoans

from src.workforce_payroll.workforce_payroll.core.enums import InstallmentStatus, LoanCategory, LoanStatus
from src.workforce_payroll.workforce_payroll.loans.model import Installment, Loan
from src.workforce_payroll.workforce_payroll.loans.service import LoanService, repayments_due, scheduled_amount

PERIOD_END = date(2025, 1, 31)


def _loan(**kw):
    base = dict(loan_id=1, loan_code="LN-1", worker_id=1, category=LoanCategory.LOAN, remaining_amount=Decimal("500"))
    base.update(kw)
    return Loan(**base)


def test_first_pending_installment_due_in_period_less_paid_amount():
    loan = _loan(
        installments=(
            Installment(1, date(2024, 12, 31), Decimal("100"), Decimal("100"), InstallmentStatus.PAID),
            Installment(2, date(2025, 1, 31), Decimal("100"), Decimal("30")),
            Installment(3, date(2025, 2, 28), Decimal("100")),
        )
    )

    assert scheduled_amount(loan, PERIOD_END) == Decimal("70")


def test_installment_due_after_period_is_not_collected():
    loan = _loan(installments=(Installment(1, date(2025, 2, 28), Decimal("100")),))

    assert repayments_due([loan], PERIOD_END) == []


def test_advance_without_schedule_is_recovered_in_full():
    loan = _loan(category=LoanCategory.ADVANCE, remaining_amount=Decimal("300"))

    (r,) = repayments_due([loan], PERIOD_END)
    assert r.amount == Decimal("300")
    assert r.description == "Salary Advance"


def test_loan_without_schedule_uses_installment_amount_then_balance():
    assert scheduled_amount(_loan(installment_amount=Decimal("120")), PERIOD_END) == Decimal("120")
    assert scheduled_amount(_loan(), PERIOD_END) == Decimal("500")


def test_inactive_and_settled_loans_are_skipped():
    loans = [
        _loan(status=LoanStatus.COMPLETED),
        _loan(loan_id=2, remaining_amount=Decimal("0")),
        _loan(loan_id=3, description="Motorbike"),
    ]

    (r,) = repayments_due(loans, PERIOD_END)
    assert r.loan_id == 3
    assert r.description == "Motorbike"


def test_service_reads_worker_loans():
    service = LoanService(InMemoryLoans([_loan(), _loan(loan_id=2, worker_id=2)]))

    assert [r.loan_id for r in service.repayments_for(1, PERIOD_END)] == [1]


def test_only_pending_installments_are_collected():
    loan = _loan(
        installments=(
            Installment(1, date(2024, 12, 31), Decimal("100"), status=InstallmentStatus.OVERDUE),
            Installment(2, date(2025, 1, 15), Decimal("80")),
        )
    )

    assert scheduled_amount(loan, PERIOD_END) == Decimal("80")
