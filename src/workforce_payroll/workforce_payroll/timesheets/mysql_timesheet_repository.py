from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..core.enums import CheckInMethod, PaymentType, TimesheetStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    dump_json,
    fetchall,
    fetchone,
    load_json,
    parse_d,
    parse_dt,
    read_errors,
    write_conflicts,
)
from .model import DailyEntry, QRCheckIn, WeeklyTimesheet
from .repository import TimesheetRepository

_COLUMNS = """
    timesheet_id, worker_id, company_id, week_start_date, daily_entries,
    total_normal_hours, total_ot1_5_hours, total_ot2_0_hours, total_hours, status, payment_type
"""


def entry_to_dict(e: DailyEntry) -> dict[str, Any]:
    qr = None
    if e.qr_code_check_in:
        qr = {
            "qrCodeData": e.qr_code_check_in.qr_code_data,
            "timestamp": e.qr_code_check_in.timestamp,
            "location": dict(e.qr_code_check_in.location) if e.qr_code_check_in.location else None,
        }
    return {
        "date": e.date,
        "dayOfWeek": e.day_of_week,
        "clockIn": e.clock_in,
        "clockOut": e.clock_out,
        "lunchOut": e.lunch_out,
        "lunchIn": e.lunch_in,
        "normalHours": e.normal_hours,
        "ot1_5Hours": e.ot1_5_hours,
        "ot2_0Hours": e.ot2_0_hours,
        "totalHours": e.total_hours,
        "isAbsent": e.is_absent,
        "leaveType": e.leave_type,
        "checkInMethod": e.check_in_method.value,
        "qrCodeCheckIn": qr,
        "notes": e.notes,
    }


def entry_from_dict(d: dict[str, Any]) -> DailyEntry:
    qr_raw = d.get("qrCodeCheckIn")
    qr = None
    if qr_raw and qr_raw.get("qrCodeData"):
        qr = QRCheckIn(
            qr_code_data=qr_raw["qrCodeData"],
            timestamp=parse_dt(qr_raw.get("timestamp")),
            location=qr_raw.get("location"),
        )
    return DailyEntry(
        date=parse_d(d["date"]),
        clock_in=parse_dt(d.get("clockIn")),
        clock_out=parse_dt(d.get("clockOut")),
        lunch_out=parse_dt(d.get("lunchOut")),
        lunch_in=parse_dt(d.get("lunchIn")),
        normal_hours=float(d.get("normalHours") or 0),
        ot1_5_hours=float(d.get("ot1_5Hours") or 0),
        ot2_0_hours=float(d.get("ot2_0Hours") or 0),
        total_hours=float(d.get("totalHours") or 0),
        is_absent=bool(d.get("isAbsent", False)),
        leave_type=d.get("leaveType"),
        check_in_method=CheckInMethod(d.get("checkInMethod") or CheckInMethod.MANUAL.value),
        qr_code_check_in=qr,
        notes=d.get("notes"),
    )


def _to_timesheet(r: dict) -> WeeklyTimesheet:
    company_id = r.get("company_id")
    payment_type = r.get("payment_type")
    return WeeklyTimesheet(
        timesheet_id=int(r["timesheet_id"]),
        worker_id=int(r["worker_id"]),
        company_id=str(company_id) if company_id is not None else None,
        week_start_date=parse_d(r["week_start_date"]),
        daily_entries=tuple(entry_from_dict(d) for d in load_json(r.get("daily_entries"), default=[])),
        total_normal_hours=float(r.get("total_normal_hours") or 0),
        total_ot1_5_hours=float(r.get("total_ot1_5_hours") or 0),
        total_ot2_0_hours=float(r.get("total_ot2_0_hours") or 0),
        total_hours=float(r.get("total_hours") or 0),
        status=TimesheetStatus(r.get("status") or TimesheetStatus.DRAFT.value),
        payment_type=PaymentType(payment_type) if payment_type else None,
    )


class MySQLTimesheetRepository(TimesheetRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, timesheet_id: int) -> Optional[WeeklyTimesheet]:
        with read_errors("timesheet"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM timesheets WHERE timesheet_id=%s", (timesheet_id,))
            r = fetchone(cur)
            return _to_timesheet(r) if r else None

    def get_for_worker_and_week(self, worker_id: int, week_start_date: date) -> Optional[WeeklyTimesheet]:
        with read_errors("timesheet"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM timesheets WHERE worker_id=%s AND week_start_date=%s",
                (worker_id, week_start_date),
            )
            r = fetchone(cur)
            return _to_timesheet(r) if r else None

    def create(self, timesheet: WeeklyTimesheet) -> int:
        with write_conflicts("Timesheet for this worker and week"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO timesheets(
                    worker_id, company_id, week_start_date, week_end_date, daily_entries,
                    total_normal_hours, total_ot1_5_hours, total_ot2_0_hours, total_hours,
                    status, payment_type
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    timesheet.worker_id,
                    timesheet.company_id,
                    timesheet.week_start_date,
                    timesheet.week_end_date,
                    dump_json([entry_to_dict(e) for e in timesheet.daily_entries]),
                    timesheet.total_normal_hours,
                    timesheet.total_ot1_5_hours,
                    timesheet.total_ot2_0_hours,
                    timesheet.total_hours,
                    timesheet.status.value,
                    timesheet.payment_type.value if timesheet.payment_type else None,
                ),
            )
            return int(cur.lastrowid)

    def update_entries(self, timesheet: WeeklyTimesheet) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE timesheets
                SET daily_entries=%s, total_normal_hours=%s, total_ot1_5_hours=%s,
                    total_ot2_0_hours=%s, total_hours=%s
                WHERE timesheet_id=%s
                """,
                (
                    dump_json([entry_to_dict(e) for e in timesheet.daily_entries]),
                    timesheet.total_normal_hours,
                    timesheet.total_ot1_5_hours,
                    timesheet.total_ot2_0_hours,
                    timesheet.total_hours,
                    timesheet.timesheet_id,
                ),
            )
            return cur.rowcount > 0

    def list_overlapping(self, worker_id: int, start: date, end: date) -> Sequence[WeeklyTimesheet]:
        with read_errors("timesheets"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM timesheets
                WHERE worker_id=%s AND week_start_date <= %s AND week_end_date >= %s
                ORDER BY week_start_date
                """,
                (worker_id, end, start),
            )
            return [_to_timesheet(r) for r in fetchall(cur)]

    def list_approved_in_period(self, worker_id: int, start: date, end: date) -> Sequence[WeeklyTimesheet]:
        with read_errors("timesheets"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM timesheets
                WHERE worker_id=%s AND status=%s AND week_start_date BETWEEN %s AND %s
                ORDER BY week_start_date
                """,
                (worker_id, TimesheetStatus.APPROVED_ADMIN.value, start, end),
            )
            return [_to_timesheet(r) for r in fetchall(cur)]
