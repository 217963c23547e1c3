from __future__ import annotations

from datetime import date

from ..common.datetime_utils import weekdays_between
from ..common.validators import require_date_range
from .model import LeaveDays
from .repository import HolidayRepository, LeaveRepository


class LeaveCalendar:
    """Working-day and approved-leave counts for salary proration."""

    def __init__(self, leaves: LeaveRepository, holidays: HolidayRepository):
        self._leaves = leaves
        self._holidays = holidays

    def working_days(self, company_id: str, start: date, end: date) -> int:
        """Mon-Fri in ``[start, end]`` minus gazetted holidays that fall on them."""
        require_date_range(start, end)
        days = set(weekdays_between(start, end))
        for h in self._holidays.list_for_company(company_id, start, end):
            if not h.is_working_day:
                days.discard(h.date)
        return len(days)

    def leave_days(self, worker_id: int, start: date, end: date) -> LeaveDays:
        paid = 0.0
        unpaid = 0.0
        for leave in self._leaves.list_approved_overlapping(worker_id, start, end):
            if leave.is_paid:
                paid += leave.total_days
            else:
                unpaid += leave.total_days
        return LeaveDays(paid=paid, unpaid=unpaid)
