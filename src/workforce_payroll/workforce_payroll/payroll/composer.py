"""Deduction composer.

Pure arithmetic over already-resolved inputs: gross pay, the worker's
deduction config, and the loan repayments due this period. Only employee
statutory contributions reduce net pay; employer contributions are carried
for cost reporting.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..common.money import money, percent_of, total
from ..compensation.model import CustomDeduction, StatutoryRates
from ..compensation.resolver import ResolvedDeductionConfig
from ..core.enums import AmountType
from ..loans.model import ScheduledRepayment
from ..timesheets.calculator import ZERO_HOURS, HourBuckets
from ..workers.model import PayItem, Worker
from .model import ComposedDeductions, DeductionLine, LoanDeduction, StatutoryContribution


def statutory(gross_pay: Decimal, rates: StatutoryRates) -> StatutoryContribution:
    if not rates.enabled:
        return StatutoryContribution()
    return StatutoryContribution(
        employee=percent_of(gross_pay, rates.employee_rate),
        employer=percent_of(gross_pay, rates.employer_rate),
    )


def resolve_amount(amount: Decimal, kind: AmountType, gross_pay: Decimal) -> Decimal:
    if kind == AmountType.PERCENTAGE:
        return percent_of(gross_pay, amount)
    return money(amount)


def custom_lines(items: Iterable[CustomDeduction], gross_pay: Decimal) -> tuple[DeductionLine, ...]:
    return tuple(
        DeductionLine(name=c.name, type=c.type, amount=resolve_amount(c.amount, c.type, gross_pay), description=c.description)
        for c in items
    )


def individual_lines(items: Iterable[PayItem], gross_pay: Decimal) -> tuple[DeductionLine, ...]:
    return tuple(
        DeductionLine(name=p.name, type=p.type, amount=resolve_amount(p.amount, p.type, gross_pay))
        for p in items
    )


def loan_lines(repayments: Iterable[ScheduledRepayment]) -> tuple[LoanDeduction, ...]:
    out = []
    for r in repayments:
        applied = money(min(r.amount, r.remaining_balance))
        out.append(
            LoanDeduction(
                loan_id=r.loan_id,
                loan_code=r.loan_code,
                category=r.category,
                description=r.description,
                amount=applied,
                remaining_after=money(max(Decimal("0"), r.remaining_balance - applied)),
            )
        )
    return tuple(out)


def compose_deductions(
    worker: Worker,
    gross_pay: Decimal,
    hour_buckets: Optional[HourBuckets],
    resolved: ResolvedDeductionConfig,
    loans: Sequence[ScheduledRepayment],
    custom_deductions: Optional[Iterable[CustomDeduction]] = None,
) -> ComposedDeductions:
    """Combine statutory, custom, loan and individual deductions into net pay.

    ``custom_deductions`` defaults to the resolved config's list.
    """
    gross = money(gross_pay)
    config = resolved.config
    hours = hour_buckets or ZERO_HOURS

    epf = statutory(gross, config.epf)
    socso = statutory(gross, config.socso)
    eis = statutory(gross, config.eis)

    custom = custom_lines(config.custom_deductions if custom_deductions is None else custom_deductions, gross)
    loan = loan_lines(loans)
    other = individual_lines(worker.deductions, gross)

    total_custom = total(c.amount for c in custom)
    total_loan = total(l.amount for l in loan)
    total_other = total(o.amount for o in other)
    total_deductions = money(
        epf.employee + socso.employee + eis.employee + total_custom + total_loan + total_other
    )

    return ComposedDeductions(
        gross_pay=gross,
        epf=epf,
        socso=socso,
        eis=eis,
        custom_deductions=custom,
        total_custom_deductions=total_custom,
        loan_deductions=loan,
        total_loan_deductions=total_loan,
        other_deductions=other,
        total_other_deductions=total_other,
        total_deductions=total_deductions,
        net_pay=money(gross - total_deductions),
        deduction_config_type=resolved.source_kind,
        deduction_config_source=resolved.source_name,
        normal_hours=hours.normal_hours,
        ot1_5_hours=hours.ot1_5_hours,
        ot2_0_hours=hours.ot2_0_hours,
    )
