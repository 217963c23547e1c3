from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from ...common.money import money
from ...companies.model import STANDARD_OVERTIME_RATES, OvertimeRates
from ...companies.repository import CompanyRepository
from ...core.enums import PaymentType
from ...core.exceptions import ValidationError
from ...timesheets.calculator import HourBuckets
from ...timesheets.repository import TimesheetRepository
from ...workers.model import Worker
from ..model import GrossPay
from .base import GrossPayCalculator


def _d(hours: float) -> Decimal:
    return Decimal(str(hours))


def hourly_gross(
    buckets: HourBuckets, hourly_rate: Decimal, rates: OvertimeRates = STANDARD_OVERTIME_RATES
) -> Decimal:
    """normal x rate + OT1.5 x rate x rates.ot1_5 + OT2.0 x rate x rates.ot2_0"""
    return money(
        _d(buckets.normal_hours) * hourly_rate
        + _d(buckets.ot1_5_hours) * hourly_rate * rates.ot1_5
        + _d(buckets.ot2_0_hours) * hourly_rate * rates.ot2_0
    )


class HourlyCalculator(GrossPayCalculator):
    """Sums the buckets of admin-approved weekly timesheets starting in the period.

    Overtime is paid at the company's own multipliers when it sets them.
    """

    def __init__(self, timesheets: TimesheetRepository, companies: Optional[CompanyRepository] = None):
        self._timesheets = timesheets
        self._companies = companies

    def _rates_for(self, worker: Worker) -> OvertimeRates:
        if self._companies is None or not worker.company_id:
            return STANDARD_OVERTIME_RATES
        return self._companies.overtime_rates(worker.company_id)

    def base_pay(self, worker: Worker, period_start: date, period_end: date) -> GrossPay:
        approved = self._timesheets.list_approved_in_period(worker.worker_id, period_start, period_end)
        if not approved:
            raise ValidationError("No approved timesheets found for this period")

        normal = sum(ts.total_normal_hours for ts in approved)
        ot1 = sum(ts.total_ot1_5_hours for ts in approved)
        ot2 = sum(ts.total_ot2_0_hours for ts in approved)
        buckets = HourBuckets(normal_hours=normal, ot1_5_hours=ot1, ot2_0_hours=ot2, total_hours=normal + ot1 + ot2)

        return GrossPay(
            payment_type=PaymentType.HOURLY,
            base_pay=hourly_gross(buckets, worker.hourly_rate, self._rates_for(worker)),
            normal_hours=normal,
            ot1_5_hours=ot1,
            ot2_0_hours=ot2,
            source_ids=tuple(ts.timesheet_id for ts in approved if ts.timesheet_id is not None),
        )
