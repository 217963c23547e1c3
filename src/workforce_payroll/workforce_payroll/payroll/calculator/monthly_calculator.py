from __future__ import annotations

import calendar
from datetime import date
from decimal import Decimal

from ...common.money import money
from ...core.enums import PaymentType
from ...leave.service import LeaveCalendar
from ...workers.model import Worker
from ..model import GrossPay
from .base import GrossPayCalculator


def days_in_month(day: date) -> int:
    return calendar.monthrange(day.year, day.month)[1]


class MonthlySalaryCalculator(GrossPayCalculator):
    """Monthly salary, pro-rated by calendar day only when unpaid leave was taken."""

    def __init__(self, leave_calendar: LeaveCalendar):
        self._calendar = leave_calendar

    def base_pay(self, worker: Worker, period_start: date, period_end: date) -> GrossPay:
        working_days = self._calendar.working_days(worker.company_id, period_start, period_end)
        leave = self._calendar.leave_days(worker.worker_id, period_start, period_end)

        salary = worker.monthly_salary
        if leave.unpaid > 0:
            actual_days = max(Decimal(str(working_days)) - Decimal(str(leave.unpaid)), Decimal("0"))
            salary = salary / Decimal(days_in_month(period_end)) * actual_days

        return GrossPay(
            payment_type=PaymentType.MONTHLY_SALARY,
            base_pay=money(salary),
            working_days=working_days,
            paid_leave_days=leave.paid,
            unpaid_leave_days=leave.unpaid,
        )
