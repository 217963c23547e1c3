from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..core.enums import AmountType, DeductionConfigType, LoanCategory, PaymentType, PayrollStatus


@dataclass(frozen=True)
class StatutoryContribution:
    employee: Decimal = Decimal("0.00")
    employer: Decimal = Decimal("0.00")

    @property
    def total(self) -> Decimal:
        return self.employee + self.employer

    def to_dict(self) -> dict[str, str]:
        return {
            "employeeContribution": str(self.employee),
            "employerContribution": str(self.employer),
            "totalContribution": str(self.total),
        }


@dataclass(frozen=True)
class DeductionLine:
    """A custom or individual deduction after resolving percentages against gross pay."""

    name: str
    type: AmountType
    amount: Decimal
    description: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type.value, "amount": str(self.amount), "description": self.description}


@dataclass(frozen=True)
class LoanDeduction:
    loan_id: int
    loan_code: str
    category: LoanCategory
    description: str
    amount: Decimal
    remaining_after: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "loanId": self.loan_id,
            "loanCode": self.loan_code,
            "category": self.category.value,
            "description": self.description,
            "amount": str(self.amount),
            "remainingAfter": str(self.remaining_after),
        }


@dataclass(frozen=True)
class GrossPay:
    """Gross pay for one worker and period, with the figures it was derived from."""

    payment_type: PaymentType
    base_pay: Decimal
    total_allowances: Decimal = Decimal("0.00")
    normal_hours: float = 0.0
    ot1_5_hours: float = 0.0
    ot2_0_hours: float = 0.0
    working_days: Optional[int] = None
    paid_leave_days: Optional[float] = None
    unpaid_leave_days: Optional[float] = None
    source_ids: tuple[int, ...] = field(default_factory=tuple)

    @property
    def gross_pay(self) -> Decimal:
        return self.base_pay + self.total_allowances

    @property
    def total_hours(self) -> float:
        return self.normal_hours + self.ot1_5_hours + self.ot2_0_hours


@dataclass(frozen=True)
class ComposedDeductions:
    gross_pay: Decimal
    epf: StatutoryContribution
    socso: StatutoryContribution
    eis: StatutoryContribution
    custom_deductions: tuple[DeductionLine, ...]
    total_custom_deductions: Decimal
    loan_deductions: tuple[LoanDeduction, ...]
    total_loan_deductions: Decimal
    other_deductions: tuple[DeductionLine, ...]
    total_other_deductions: Decimal
    total_deductions: Decimal
    net_pay: Decimal
    deduction_config_type: Optional[DeductionConfigType]
    deduction_config_source: Optional[str]
    normal_hours: float = 0.0
    ot1_5_hours: float = 0.0
    ot2_0_hours: float = 0.0

    @property
    def statutory_employee_total(self) -> Decimal:
        return self.epf.employee + self.socso.employee + self.eis.employee


@dataclass(frozen=True)
class PayrollRecord:
    payroll_id: Optional[int]
    worker_id: int
    company_id: Optional[str]
    period_start: date
    period_end: date
    gross: GrossPay
    deductions: ComposedDeductions
    status: PayrollStatus = PayrollStatus.DRAFT

    @property
    def net_pay(self) -> Decimal:
        return self.deductions.net_pay

    def to_dict(self) -> dict[str, Any]:
        d = self.deductions
        g = self.gross
        return {
            "id": self.payroll_id,
            "workerId": self.worker_id,
            "companyId": self.company_id,
            "periodStart": self.period_start.isoformat(),
            "periodEnd": self.period_end.isoformat(),
            "paymentType": g.payment_type.value,
            "basePay": str(g.base_pay),
            "totalAllowances": str(g.total_allowances),
            "grossPay": str(d.gross_pay),
            "totalNormalHours": g.normal_hours,
            "totalOT1_5Hours": g.ot1_5_hours,
            "totalOT2_0Hours": g.ot2_0_hours,
            "totalHours": g.total_hours,
            "workingDays": g.working_days,
            "paidLeaveDays": g.paid_leave_days,
            "unpaidLeaveDays": g.unpaid_leave_days,
            "epf": d.epf.to_dict(),
            "socso": d.socso.to_dict(),
            "eis": d.eis.to_dict(),
            "customDeductions": [c.to_dict() for c in d.custom_deductions],
            "totalCustomDeductions": str(d.total_custom_deductions),
            "loanDeductions": [l.to_dict() for l in d.loan_deductions],
            "totalLoanDeductions": str(d.total_loan_deductions),
            "otherDeductions": [o.to_dict() for o in d.other_deductions],
            "totalOtherDeductions": str(d.total_other_deductions),
            "totalDeductions": str(d.total_deductions),
            "netPay": str(d.net_pay),
            "deductionConfigType": d.deduction_config_type.value if d.deduction_config_type else None,
            "deductionConfigSource": d.deduction_config_source,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class UnitRecord:
    unit_record_id: int
    worker_id: int
    work_date: date
    unit_type: str
    units_completed: int
    total_amount: Decimal
    units_rejected: int = 0
