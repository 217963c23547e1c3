from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..clients.service import TimesheetSettingsResolver
from ..common.datetime_utils import week_start
from ..common.validators import require_date_range
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError
from ..users.model import User
from ..workers.repository import WorkerRepository
from .calculator import HoursCalculator
from .model import WeeklyTimesheet, empty_week, with_totals
from .repository import TimesheetRepository

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    created: int
    skipped: int


def leave_code(leave_type_name: Optional[str], explicit_code: Optional[str] = None) -> str:
    """Short leave code stamped on timesheet entries.

    A recognised leave-type name wins over the explicit code; anything
    unrecognised without a code counts as unpaid.
    """
    name = (leave_type_name or "").lower()
    if "annual" in name:
        return "AL"
    if "sick" in name or "medical" in name:
        return "MC"
    if "unpaid" in name:
        return "UL"
    if explicit_code:
        return explicit_code.strip().upper()
    return "UL"


def _check_company(user: Optional[User], company_id: Optional[str]) -> None:
    if user is not None and user.role == Role.SUBCON_ADMIN and str(user.company_id) != str(company_id):
        raise AuthorizationError("Unauthorized access to company")


class TimesheetService:
    def __init__(
        self,
        timesheets: TimesheetRepository,
        workers: WorkerRepository,
        settings: TimesheetSettingsResolver,
        *,
        calculator: Optional[HoursCalculator] = None,
    ):
        self._timesheets = timesheets
        self._workers = workers
        self._settings = settings
        self._calculator = calculator or HoursCalculator()

    def recalculate(self, timesheet_id: int, *, requested_by: Optional[User] = None) -> WeeklyTimesheet:
        """Recompute every entry's hour buckets and the week totals."""
        ts = self._timesheets.get_by_id(timesheet_id)
        if not ts:
            raise NotFoundError("Timesheet not found")
        _check_company(requested_by, ts.company_id)
        worker = self._workers.get_by_id(ts.worker_id)
        if not worker:
            raise NotFoundError("Worker not found")

        settings = self._settings.for_worker(worker)
        entries = tuple(self._calculator.apply(e, settings) for e in ts.daily_entries)
        updated = with_totals(replace(ts, daily_entries=entries))
        self._timesheets.update_entries(updated)
        return updated

    def generate_week(self, company_id: str, day: date) -> GenerationResult:
        """Create empty Mon..Sun timesheets for the company's hourly and unit-based workers."""
        start = week_start(day)
        created = skipped = 0

        for worker in self._workers.list_timesheet_workers(company_id):
            if self._timesheets.get_for_worker_and_week(worker.worker_id, start):
                skipped += 1
                continue
            ts = empty_week(
                worker_id=worker.worker_id,
                company_id=worker.company_id,
                week_start_date=start,
                payment_type=worker.payment_type,
            )
            try:
                self._timesheets.create(ts)
            except ConflictError:
                # Created concurrently by a check-in for the same week.
                skipped += 1
                continue
            created += 1

        log.info("weekly timesheets for company %s week %s: created=%d skipped=%d", company_id, start, created, skipped)
        return GenerationResult(created=created, skipped=skipped)

    def apply_leave(
        self,
        worker_id: int,
        start: date,
        end: date,
        *,
        leave_type_name: Optional[str] = None,
        code: Optional[str] = None,
        requested_by: Optional[User] = None,
    ) -> int:
        """Mark entries in [start, end] as leave, clearing their clock data and hours.

        Returns the number of timesheets modified.
        """
        require_date_range(start, end)
        self._check_worker_company(worker_id, requested_by)
        lc = leave_code(leave_type_name, code)
        note = f"{leave_type_name or 'Leave'} - Approved"

        def mark(e):
            return replace(
                e.zeroed(),
                is_absent=True,
                leave_type=lc,
                notes=note,
                clock_in=None,
                clock_out=None,
                lunch_out=None,
                lunch_in=None,
            )

        return self._rewrite_entries(worker_id, start, end, mark)

    def clear_leave(
        self, worker_id: int, start: date, end: date, *, requested_by: Optional[User] = None
    ) -> int:
        require_date_range(start, end)
        self._check_worker_company(worker_id, requested_by)
        return self._rewrite_entries(
            worker_id, start, end, lambda e: replace(e, is_absent=False, leave_type=None, notes=None)
        )

    def _check_worker_company(self, worker_id: int, user: Optional[User]) -> None:
        if user is None or user.role != Role.SUBCON_ADMIN:
            return
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError("Worker not found")
        _check_company(user, worker.company_id)

    def _rewrite_entries(self, worker_id: int, start: date, end: date, fn) -> int:
        modified = 0
        for ts in self._timesheets.list_overlapping(worker_id, start, end):
            entries = tuple(fn(e) if start <= e.date <= end else e for e in ts.daily_entries)
            if entries == ts.daily_entries:
                continue
            self._timesheets.update_entries(with_totals(replace(ts, daily_entries=entries)))
            modified += 1
        return modified
