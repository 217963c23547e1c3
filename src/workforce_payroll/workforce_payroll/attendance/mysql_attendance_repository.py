from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional

from ..core.enums import AttendanceStatus, CheckInMethod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchone, load_json, read_errors, write_conflicts
from .model import AttendanceRecord
from .repository import AttendanceRepository

_PATCHABLE = {
    "clock_in",
    "clock_out",
    "lunch_out",
    "lunch_in",
    "check_in_method",
    "qr_code_data",
    "location",
    "status",
    "note",
}


def _column_value(name: str, value: Any) -> Any:
    if name == "location":
        return dump_json(value) if value is not None else None
    if isinstance(value, (AttendanceStatus, CheckInMethod)):
        return value.value
    return value


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_worker_and_date(self, worker_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with read_errors("attendance"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, worker_id, company_id, work_date, clock_in, clock_out,
                       lunch_out, lunch_in, check_in_method, qr_code_data, location, status, note
                FROM attendance_records
                WHERE worker_id=%s AND work_date=%s
                """,
                (worker_id, work_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            company_id = r.get("company_id")
            return AttendanceRecord(
                attendance_id=int(r["attendance_id"]),
                worker_id=int(r["worker_id"]),
                company_id=str(company_id) if company_id is not None else None,
                work_date=r["work_date"],
                clock_in=r.get("clock_in"),
                clock_out=r.get("clock_out"),
                lunch_out=r.get("lunch_out"),
                lunch_in=r.get("lunch_in"),
                check_in_method=CheckInMethod(r.get("check_in_method") or CheckInMethod.MANUAL.value),
                qr_code_data=r.get("qr_code_data"),
                location=load_json(r.get("location")),
                status=AttendanceStatus(r.get("status") or AttendanceStatus.PRESENT.value),
                note=r.get("note"),
            )

    def create(self, record: AttendanceRecord) -> int:
        with write_conflicts("Attendance for this worker and date"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    worker_id, company_id, work_date, clock_in, clock_out, lunch_out, lunch_in,
                    check_in_method, qr_code_data, location, status, note
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.worker_id,
                    record.company_id,
                    record.work_date,
                    record.clock_in,
                    record.clock_out,
                    record.lunch_out,
                    record.lunch_in,
                    record.check_in_method.value,
                    record.qr_code_data,
                    _column_value("location", record.location),
                    record.status.value,
                    record.note,
                ),
            )
            return int(cur.lastrowid)

    def patch(self, attendance_id: int, fields: Mapping[str, Any]) -> bool:
        unknown = set(fields) - _PATCHABLE
        if unknown:
            raise ValueError(f"Unsupported attendance fields: {sorted(unknown)}")
        if not fields:
            return False

        names = sorted(fields)
        assignments = ", ".join(f"{n}=%s" for n in names)
        params = [_column_value(n, fields[n]) for n in names]
        params.append(int(attendance_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE attendance_records SET {assignments} WHERE attendance_id=%s", tuple(params))
            return cur.rowcount > 0
