from __future__ import annotations

from typing import Optional

from ...companies.repository import CompanyRepository
from ...core.enums import PaymentType
from ...leave.service import LeaveCalendar
from ...timesheets.repository import TimesheetRepository
from ..repository import UnitRecordRepository
from .base import GrossPayCalculator
from .hourly_calculator import HourlyCalculator
from .monthly_calculator import MonthlySalaryCalculator
from .unit_calculator import UnitBasedCalculator


class GrossPayCalculatorFactory:
    """Factory Pattern: create a gross pay calculator for a payment type."""

    def __init__(
        self,
        *,
        leave_calendar: LeaveCalendar,
        timesheets: TimesheetRepository,
        unit_records: UnitRecordRepository,
        companies: Optional[CompanyRepository] = None,
    ):
        self._calculators: dict[PaymentType, GrossPayCalculator] = {
            PaymentType.MONTHLY_SALARY: MonthlySalaryCalculator(leave_calendar),
            PaymentType.HOURLY: HourlyCalculator(timesheets, companies),
            PaymentType.UNIT_BASED: UnitBasedCalculator(unit_records),
        }

    def for_payment_type(self, payment_type: PaymentType) -> GrossPayCalculator:
        return self._calculators[payment_type]
