from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, parse_d, read_errors
from .model import Holiday, LeaveRequest
from .repository import HolidayRepository, LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_approved_overlapping(self, worker_id: int, start: date, end: date) -> Sequence[LeaveRequest]:
        with read_errors("leave requests"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT lr.leave_id, lr.worker_id, lr.start_date, lr.end_date, lr.total_days, lr.status,
                       lt.name AS leave_type_name, lt.code AS leave_code, lt.is_paid
                FROM leave_requests lr
                JOIN leave_types lt ON lt.leave_type_id = lr.leave_type_id
                WHERE lr.worker_id=%s AND lr.status='approved'
                  AND lr.start_date <= %s AND lr.end_date >= %s
                ORDER BY lr.start_date
                """,
                (worker_id, end, start),
            )
            return [
                LeaveRequest(
                    leave_id=int(r["leave_id"]),
                    worker_id=int(r["worker_id"]),
                    start_date=parse_d(r["start_date"]),
                    end_date=parse_d(r["end_date"]),
                    total_days=float(r.get("total_days") or 0),
                    leave_type_name=r.get("leave_type_name") or "",
                    is_paid=bool(r.get("is_paid")),
                    leave_code=r.get("leave_code"),
                    status=r.get("status") or "approved",
                )
                for r in fetchall(cur)
            ]


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_company(self, company_id: str, start: date, end: date) -> Sequence[Holiday]:
        with read_errors("gazetted holidays"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT company_id, holiday_date, name, is_working_day
                FROM gazetted_holidays
                WHERE company_id=%s AND holiday_date BETWEEN %s AND %s
                ORDER BY holiday_date
                """,
                (company_id, start, end),
            )
            return [
                Holiday(
                    company_id=str(r["company_id"]),
                    date=parse_d(r["holiday_date"]),
                    name=r.get("name") or "",
                    is_working_day=bool(r.get("is_working_day")),
                )
                for r in fetchall(cur)
            ]
