from decimal import Decimal

import pytest

from src.workforce_payroll.workforce_payroll.compensation.model import (
    PLATFORM_DEFAULT_RATES,
    CustomDeduction,
    DeductionConfig,
    StatutoryRates,
)
from src.workforce_payroll.workforce_payroll.compensation.resolver import (
    ResolvedDeductionConfig,
    resolve_deduction_config,
)
from src.workforce_payroll.workforce_payroll.core.enums import (
    AmountType,
    DeductionConfigType,
    LoanCategory,
    PaymentType,
)
from src.workforce_payroll.workforce_payroll.loans.model import ScheduledRepayment
from src.workforce_payroll.workforce_payroll.payroll.calculator.hourly_calculator import hourly_gross
from src.workforce_payroll.workforce_payroll.payroll.composer import compose_deductions
from src.workforce_payroll.workforce_payroll.timesheets.calculator import HourBuckets
from src.workforce_payroll.workforce_payroll.workers.model import PayItem, Worker

DEFAULTS = ResolvedDeductionConfig(PLATFORM_DEFAULT_RATES, None, None)


def _worker(**kw):
    return Worker(worker_id=1, company=1, payment_type=PaymentType.HOURLY, hourly_rate=Decimal("20"), **kw)


def _repayment(amount, remaining, loan_id=1):
    return ScheduledRepayment(
        loan_id=loan_id,
        loan_code=f"LN-{loan_id}",
        category=LoanCategory.LOAN,
        description="Loan Repayment",
        amount=Decimal(amount),
        remaining_balance=Decimal(remaining),
    )


def test_hourly_scenario_gross_pay():
    buckets = HourBuckets(normal_hours=8.0, ot1_5_hours=2.0, ot2_0_hours=0.0, total_hours=10.0)

    assert hourly_gross(buckets, Decimal("20")) == Decimal("220.00")


def test_default_statutory_rates_on_scenario_gross():
    hours = HourBuckets(normal_hours=8.0, ot1_5_hours=2.0, total_hours=10.0)
    out = compose_deductions(_worker(), Decimal("220"), hours, DEFAULTS, [])

    assert out.epf.employee == Decimal("24.20")
    assert out.epf.employer == Decimal("26.40")
    assert out.socso.employee == Decimal("1.10")
    assert out.socso.employer == Decimal("3.85")
    assert out.eis.employee == Decimal("0.44")
    assert out.eis.employer == Decimal("0.44")
    assert out.total_deductions == Decimal("25.74")
    assert out.net_pay == Decimal("194.26")
    assert out.deduction_config_type is None
    assert out.normal_hours == 8.0


def test_disabled_schemes_contribute_nothing():
    config = DeductionConfig(
        config_type=DeductionConfigType.BAND,
        job_band_id=3,
        job_band_name="Band C",
        epf=StatutoryRates(False, Decimal("11"), Decimal("12")),
        socso=StatutoryRates(False, Decimal("0.5"), Decimal("1.75")),
        eis=StatutoryRates(False, Decimal("0.2"), Decimal("0.2")),
    )
    resolved = resolve_deduction_config(_worker(job_band_id=3), [config])

    out = compose_deductions(_worker(job_band_id=3), Decimal("1000"), None, resolved, [])

    assert out.statutory_employee_total == Decimal("0")
    assert out.epf.employer == Decimal("0")
    assert out.net_pay == Decimal("1000.00")
    assert out.deduction_config_type == DeductionConfigType.BAND
    assert out.deduction_config_source == "Band C"


def test_custom_fixed_and_percentage_deductions():
    config = DeductionConfig(
        config_type=DeductionConfigType.GROUP,
        group_id=1,
        group_name="Crew",
        custom_deductions=(
            CustomDeduction("Uniform", Decimal("10"), AmountType.FIXED),
            CustomDeduction("Welfare", Decimal("2"), AmountType.PERCENTAGE),
        ),
    )
    resolved = resolve_deduction_config(_worker(worker_group_id=1), [config])

    out = compose_deductions(_worker(worker_group_id=1), Decimal("220"), None, resolved, [])

    assert [c.amount for c in out.custom_deductions] == [Decimal("10.00"), Decimal("4.40")]
    assert out.total_custom_deductions == Decimal("14.40")
    assert out.deduction_config_type == DeductionConfigType.GROUP
    assert out.deduction_config_source == "Crew"


def test_explicit_custom_deductions_override_config_list():
    out = compose_deductions(
        _worker(), Decimal("100"), None, DEFAULTS, [], [CustomDeduction("Tools", Decimal("5"))]
    )

    assert out.total_custom_deductions == Decimal("5.00")


def test_loan_repayment_is_capped_at_remaining_balance():
    out = compose_deductions(
        _worker(), Decimal("2000"), None, DEFAULTS, [_repayment("100", "60"), _repayment("50", "500", loan_id=2)]
    )

    capped, regular = out.loan_deductions
    assert (capped.amount, capped.remaining_after) == (Decimal("60.00"), Decimal("0.00"))
    assert (regular.amount, regular.remaining_after) == (Decimal("50.00"), Decimal("450.00"))
    assert out.total_loan_deductions == Decimal("110.00")


def test_worker_individual_deductions_are_included_in_total():
    worker = _worker(deductions=(PayItem("Hostel", Decimal("50")), PayItem("Meal", Decimal("1"), AmountType.PERCENTAGE)))

    out = compose_deductions(worker, Decimal("1000"), None, DEFAULTS, [])

    assert out.total_other_deductions == Decimal("60.00")
    assert out.total_deductions == out.statutory_employee_total + Decimal("60.00")


@pytest.mark.parametrize("gross", ["0", "220", "1234.56", "3999.99", "10000"])
def test_net_pay_identity(gross):
    config = DeductionConfig(
        config_type=DeductionConfigType.GROUP,
        group_id=1,
        group_name="Crew",
        custom_deductions=(CustomDeduction("Welfare", Decimal("1.5"), AmountType.PERCENTAGE),),
    )
    resolved = resolve_deduction_config(_worker(worker_group_id=1), [config])

    out = compose_deductions(_worker(worker_group_id=1), Decimal(gross), None, resolved, [_repayment("75", "500")])

    assert out.net_pay == out.gross_pay - (
        out.epf.employee + out.socso.employee + out.eis.employee
        + out.total_custom_deductions + out.total_loan_deductions
    )
