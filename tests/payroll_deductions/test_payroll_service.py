import logging
from datetime import date
from decimal import Decimal

import pytest

from inmemory import (
    InMemoryCompanies,
    InMemoryCompensation,
    InMemoryHolidays,
    InMemoryLeave,
    InMemoryLoans,
    InMemoryPayroll,
    InMemoryTimesheets,
    InMemoryUnitRecords,
    InMemoryWorkers,
)

from src.workforce_payroll.workforce_payroll.companies.model import OvertimeRates
from src.workforce_payroll.workforce_payroll.compensation.model import CompensationConfig, DeductionConfig
from src.workforce_payroll.workforce_payroll.core.enums import (
    DeductionConfigType,
    LoanCategory,
    PaymentType,
    PayrollStatus,
    Role,
    TimesheetStatus,
)
from src.workforce_payroll.workforce_payroll.core.exceptions import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.workforce_payroll.workforce_payroll.leave.service import LeaveCalendar
from src.workforce_payroll.workforce_payroll.loans.model import Loan
from src.workforce_payroll.workforce_payroll.loans.service import LoanService
from src.workforce_payroll.workforce_payroll.payroll.calculator.factory import GrossPayCalculatorFactory
from src.workforce_payroll.workforce_payroll.payroll.service import PayrollService
from src.workforce_payroll.workforce_payroll.timesheets.model import WeeklyTimesheet
from src.workforce_payroll.workforce_payroll.users.model import User
from src.workforce_payroll.workforce_payroll.workers.model import Worker

JAN_1 = date(2025, 1, 1)
JAN_31 = date(2025, 1, 31)


def _build(configs=(), loans=(), companies=None):
    workers = InMemoryWorkers({
        1: Worker(worker_id=1, company={"id": 7}, payment_type=PaymentType.HOURLY, hourly_rate=Decimal("20"),
                  worker_group_id=3, job_band_id=4),
        2: Worker(worker_id=2, company=None, payment_type=PaymentType.HOURLY),
    })
    timesheets = InMemoryTimesheets()
    timesheets.add(WeeklyTimesheet(timesheet_id=None, worker_id=1, company_id="7", week_start_date=date(2025, 1, 6),
                                   total_normal_hours=8.0, total_ot1_5_hours=2.0, total_hours=10.0,
                                   status=TimesheetStatus.APPROVED_ADMIN))
    payroll = InMemoryPayroll()
    service = PayrollService(
        workers,
        InMemoryCompensation({"7": CompensationConfig("7", tuple(configs))}),
        LoanService(InMemoryLoans(list(loans))),
        payroll,
        calculators=GrossPayCalculatorFactory(
            leave_calendar=LeaveCalendar(InMemoryLeave(), InMemoryHolidays()),
            timesheets=timesheets,
            unit_records=InMemoryUnitRecords(),
            companies=companies,
        ),
    )
    return service, payroll


def test_generate_hourly_record_with_defaults(caplog):
    service, payroll = _build()

    with caplog.at_level(logging.INFO):
        record = service.generate(1, JAN_1, JAN_31)

    assert record.payroll_id == 1
    assert record.status == PayrollStatus.DRAFT
    assert record.company_id == "7"
    assert record.deductions.gross_pay == Decimal("220.00")
    assert record.net_pay == Decimal("194.26")
    assert record.deductions.deduction_config_type is None
    assert payroll.records[0].deductions.net_pay == Decimal("194.26")
    assert "platform defaults" in caplog.text


def test_generate_records_matched_group_config_and_loans():
    configs = [
        DeductionConfig(config_type=DeductionConfigType.BAND, job_band_id=4, job_band_name="Band D"),
        DeductionConfig(config_type=DeductionConfigType.GROUP, group_id=3, group_name="Riggers"),
    ]
    loans = [Loan(loan_id=9, loan_code="ADV-9", worker_id=1, category=LoanCategory.ADVANCE,
                  remaining_amount=Decimal("50"))]
    service, _ = _build(configs, loans)

    record = service.generate(1, JAN_1, JAN_31)
    data = record.to_dict()

    assert data["deductionConfigType"] == "group"
    assert data["deductionConfigSource"] == "Riggers"
    assert data["totalLoanDeductions"] == "50.00"
    assert data["loanDeductions"][0]["remainingAfter"] == "0.00"
    assert data["netPay"] == "144.26"
    assert data["epf"]["employeeContribution"] == "24.20"


def test_generate_rejects_unknown_worker_and_missing_company():
    service, _ = _build()

    with pytest.raises(NotFoundError):
        service.generate(99, JAN_1, JAN_31)
    with pytest.raises(ValidationError):
        service.generate(2, JAN_1, JAN_31)
    with pytest.raises(ValidationError):
        service.generate(1, JAN_31, JAN_1)


def test_subcon_admin_limited_to_own_company():
    service, _ = _build()

    with pytest.raises(AuthorizationError):
        service.generate(1, JAN_1, JAN_31, requested_by=User(1, "s", Role.SUBCON_ADMIN, company_id=8))

    record = service.generate(1, JAN_1, JAN_31, requested_by=User(1, "s", Role.SUBCON_ADMIN, company_id=7))
    assert record.worker_id == 1


def test_regenerating_a_period_creates_a_new_draft():
    service, payroll = _build()
    first = service.generate(1, JAN_1, JAN_31)

    second = service.generate(1, JAN_1, JAN_31)

    assert second.payroll_id == 2
    assert first.payroll_id == 1
    assert [r.status for r in payroll.records] == [PayrollStatus.DRAFT, PayrollStatus.DRAFT]


def test_company_overtime_rates_apply_to_hourly_pay():
    service, _ = _build(companies=InMemoryCompanies({"7": OvertimeRates.with_overrides(ot1_5=2)}))

    record = service.generate(1, JAN_1, JAN_31)

    assert record.deductions.gross_pay == Decimal("240.00")
