from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, parse_d, read_errors
from .model import UnitRecord
from .repository import UnitRecordRepository


class MySQLUnitRecordRepository(UnitRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_approved(self, worker_id: int, start: date, end: date) -> Sequence[UnitRecord]:
        with read_errors("unit records"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT unit_record_id, worker_id, work_date, unit_type, units_completed,
                       units_rejected, total_amount
                FROM unit_records
                WHERE worker_id=%s AND status='approved' AND work_date BETWEEN %s AND %s
                ORDER BY work_date, unit_record_id
                """,
                (worker_id, start, end),
            )
            return [
                UnitRecord(
                    unit_record_id=int(r["unit_record_id"]),
                    worker_id=int(r["worker_id"]),
                    work_date=parse_d(r["work_date"]),
                    unit_type=r.get("unit_type") or "",
                    units_completed=int(r.get("units_completed") or 0),
                    units_rejected=int(r.get("units_rejected") or 0),
                    total_amount=as_decimal(r.get("total_amount")),
                )
                for r in fetchall(cur)
            ]
