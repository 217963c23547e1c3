from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local, week_start
from ..core.enums import CheckInMethod, ClockAction, Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, StoreReadError, ValidationError
from ..timesheets.model import DailyEntry, QRCheckIn, WeeklyTimesheet
from ..timesheets.repository import TimesheetRepository
from ..users.model import User
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from .actions import ACTION_FIELDS, action_message, parse_action, stamp_of, stamped
from .locks import WorkerLocks
from .model import CheckInResult, CheckInStatus

log = logging.getLogger(__name__)


def _require_worker_user(user: Optional[User]) -> int:
    if user is None:
        raise AuthorizationError("Authentication required")
    if user.role != Role.WORKER:
        raise AuthorizationError("This endpoint is only for workers")
    if user.worker_id is None:
        raise AuthorizationError("Worker account not properly linked")
    return int(user.worker_id)


def _method(qr_code: Optional[str]) -> CheckInMethod:
    return CheckInMethod.QR_CODE if qr_code else CheckInMethod.MANUAL


class CheckInService:
    """Routes worker clock events to the record type their payment model uses.

    Monthly-salary workers get one attendance record per day; hourly and
    unit-based workers get a daily entry inside their weekly timesheet. Each
    worker's events are serialised and store collisions on the per-day / per-week
    unique keys fall back to patching the record that won.
    """

    def __init__(
        self,
        workers: WorkerRepository,
        attendance: AttendanceRepository,
        timesheets: TimesheetRepository,
        *,
        locks: Optional[WorkerLocks] = None,
    ):
        self._workers = workers
        self._attendance = attendance
        self._timesheets = timesheets
        self._locks = locks or WorkerLocks()

    def record_check_in(
        self,
        user: Optional[User],
        action: Optional[str],
        *,
        qr_code: Optional[str] = None,
        location: Optional[Mapping[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> CheckInResult:
        worker_id = _require_worker_user(user)
        act = parse_action(action)
        now = now or now_local()

        worker = self._get_worker(worker_id)
        company_id = worker.company_id
        if not company_id:
            raise ValidationError("Worker has no company assigned")

        log.info(
            "worker check-in worker=%s company=%s action=%s payment_type=%s",
            worker_id, company_id, act.value, worker.payment_type.value,
        )

        with self._locks.hold(worker_id):
            if worker.is_monthly:
                self._record_attendance(worker, company_id, act, now, qr_code, location)
            else:
                self._record_timesheet(worker, company_id, act, now, qr_code, location)

        return CheckInResult(success=True, action=act, time=now, message=f"Successfully {action_message(act)}")

    def get_status(self, user: Optional[User], *, now: Optional[datetime] = None) -> CheckInStatus:
        worker_id = _require_worker_user(user)
        today = (now or now_local()).date()
        worker = self._get_worker(worker_id)

        if worker.is_monthly:
            record = self._read(lambda: self._attendance.get_for_worker_and_date(worker_id, today), "attendance")
        else:
            ts = self._read(
                lambda: self._timesheets.get_for_worker_and_week(worker_id, week_start(today)), "timesheet"
            )
            record = ts.entry_for(today) if ts else None

        if record is None:
            return CheckInStatus()
        return CheckInStatus(
            has_checked_in=record.clock_in is not None,
            clock_in=record.clock_in,
            clock_out=record.clock_out,
            lunch_out=record.lunch_out,
            lunch_in=record.lunch_in,
            check_in_method=record.check_in_method.value,
        )

    def _get_worker(self, worker_id: int) -> Worker:
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError("Worker not found")
        return worker

    @staticmethod
    def _read(fn, what: str):
        # A failed read must not be mistaken for "no record yet", which would
        # create a duplicate on the next write.
        try:
            return fn()
        except StoreReadError:
            log.exception("reading %s failed", what)
            raise

    def _record_attendance(
        self,
        worker: Worker,
        company_id: str,
        action: ClockAction,
        now: datetime,
        qr_code: Optional[str],
        location: Optional[Mapping[str, Any]],
    ) -> None:
        today = now.date()
        existing = self._read(lambda: self._attendance.get_for_worker_and_date(worker.worker_id, today), "attendance")

        if existing is None:
            record = stamped(
                AttendanceRecord(
                    attendance_id=None,
                    worker_id=worker.worker_id,
                    company_id=company_id,
                    work_date=today,
                    check_in_method=_method(qr_code),
                    qr_code_data=qr_code or None,
                    location=location or None,
                ),
                action,
                now,
            )
            try:
                attendance_id = self._attendance.create(record)
                log.info("attendance %s created for worker %s on %s", attendance_id, worker.worker_id, today)
                return
            except ConflictError:
                log.info("attendance for worker %s on %s created concurrently; patching", worker.worker_id, today)
                existing = self._read(
                    lambda: self._attendance.get_for_worker_and_date(worker.worker_id, today), "attendance"
                )
                if existing is None:
                    raise

        self._log_overwrite(worker.worker_id, action, stamp_of(existing, action), now)

        fields: dict[str, Any] = {ACTION_FIELDS[action]: now}
        if qr_code and action == ClockAction.CLOCK_IN:
            fields["check_in_method"] = CheckInMethod.QR_CODE
            fields["qr_code_data"] = qr_code
            if location:
                fields["location"] = location

        self._attendance.patch(existing.attendance_id, fields)

    def _record_timesheet(
        self,
        worker: Worker,
        company_id: str,
        action: ClockAction,
        now: datetime,
        qr_code: Optional[str],
        location: Optional[Mapping[str, Any]],
    ) -> None:
        today = now.date()
        start = week_start(today)
        ts = self._read(lambda: self._timesheets.get_for_worker_and_week(worker.worker_id, start), "timesheet")

        if ts is None:
            fresh = WeeklyTimesheet(
                timesheet_id=None,
                worker_id=worker.worker_id,
                company_id=company_id,
                week_start_date=start,
                daily_entries=(self._new_entry(today, action, now, qr_code, location),),
                payment_type=worker.payment_type,
            )
            try:
                timesheet_id = self._timesheets.create(fresh)
                log.info("timesheet %s created for worker %s week %s", timesheet_id, worker.worker_id, start)
                return
            except ConflictError:
                log.info("timesheet for worker %s week %s created concurrently; patching", worker.worker_id, start)
                ts = self._read(
                    lambda: self._timesheets.get_for_worker_and_week(worker.worker_id, start), "timesheet"
                )
                if ts is None:
                    raise

        entry = ts.entry_for(today)
        if entry is None:
            entry = self._new_entry(today, action, now, qr_code, location)
        else:
            self._log_overwrite(worker.worker_id, action, stamp_of(entry, action), now)
            entry = stamped(entry, action, now)
            if qr_code and action == ClockAction.CLOCK_IN:
                entry = replace(
                    entry,
                    check_in_method=CheckInMethod.QR_CODE,
                    qr_code_check_in=QRCheckIn(qr_code_data=qr_code, timestamp=now, location=location),
                )

        self._timesheets.update_entries(ts.with_entry(entry))

    @staticmethod
    def _new_entry(
        day: date,
        action: ClockAction,
        now: datetime,
        qr_code: Optional[str],
        location: Optional[Mapping[str, Any]],
    ) -> DailyEntry:
        qr = QRCheckIn(qr_code_data=qr_code, timestamp=now, location=location) if qr_code else None
        return stamped(DailyEntry(date=day, check_in_method=_method(qr_code), qr_code_check_in=qr), action, now)

    @staticmethod
    def _log_overwrite(worker_id: int, action: ClockAction, previous: Optional[datetime], now: datetime) -> None:
        if previous is not None:
            log.info("worker %s %s overwritten: %s -> %s", worker_id, action.value, previous, now)
