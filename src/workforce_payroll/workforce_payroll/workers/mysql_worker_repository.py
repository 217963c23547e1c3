from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import AmountType, PaymentType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone, load_json, read_errors
from .model import PayItem, Worker
from .repository import WorkerRepository

_COLUMNS = """
    worker_id, company_id, full_name, payment_type, project_id, worker_group_id, job_band_id,
    hourly_rate, monthly_salary, allowances, deductions, is_active
"""


def _pay_items(raw: Any) -> tuple[PayItem, ...]:
    return tuple(
        PayItem(
            name=str(item.get("name") or ""),
            amount=as_decimal(item.get("amount")),
            type=AmountType(item.get("type") or AmountType.FIXED.value),
        )
        for item in load_json(raw, default=[])
    )


def _to_worker(r: dict) -> Worker:
    return Worker(
        worker_id=int(r["worker_id"]),
        company=r.get("company_id"),
        full_name=r.get("full_name") or "",
        payment_type=PaymentType(r.get("payment_type") or PaymentType.HOURLY.value),
        project_id=r.get("project_id"),
        worker_group_id=r.get("worker_group_id"),
        job_band_id=r.get("job_band_id"),
        hourly_rate=as_decimal(r.get("hourly_rate")),
        monthly_salary=as_decimal(r.get("monthly_salary")),
        allowances=_pay_items(r.get("allowances")),
        deductions=_pay_items(r.get("deductions")),
        is_active=bool(r.get("is_active", True)),
    )


class MySQLWorkerRepository(WorkerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        with read_errors("worker"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers WHERE worker_id=%s", (worker_id,))
            r = fetchone(cur)
            return _to_worker(r) if r else None

    def list_timesheet_workers(self, company_id: str) -> Sequence[Worker]:
        with read_errors("workers"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM workers
                WHERE company_id=%s AND is_active=1 AND payment_type IN ('hourly', 'unit-based')
                ORDER BY worker_id
                """,
                (company_id,),
            )
            return [_to_worker(r) for r in fetchall(cur)]
