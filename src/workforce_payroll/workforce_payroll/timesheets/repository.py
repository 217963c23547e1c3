from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import WeeklyTimesheet


class TimesheetRepository(Protocol):
    def get_by_id(self, timesheet_id: int) -> Optional[WeeklyTimesheet]:
        raise NotImplementedError

    def get_for_worker_and_week(self, worker_id: int, week_start_date: date) -> Optional[WeeklyTimesheet]:
        raise NotImplementedError

    def create(self, timesheet: WeeklyTimesheet) -> int:
        """Insert a new timesheet; raises ConflictError if (worker, week) already exists."""

        raise NotImplementedError

    def update_entries(self, timesheet: WeeklyTimesheet) -> bool:
        """Persist the full daily entry list together with the derived totals."""

        raise NotImplementedError

    def list_overlapping(self, worker_id: int, start: date, end: date) -> Sequence[WeeklyTimesheet]:
        raise NotImplementedError

    def list_approved_in_period(self, worker_id: int, start: date, end: date) -> Sequence[WeeklyTimesheet]:
        """Admin-approved timesheets whose week starts within the period."""

        raise NotImplementedError
