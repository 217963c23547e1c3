from __future__ import annotations

from typing import Sequence

from ..core.enums import InstallmentStatus, LoanCategory, LoanStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, load_json, parse_d, read_errors
from .model import Installment, Loan
from .repository import LoanRepository


class MySQLLoanRepository(LoanRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active_for_worker(self, worker_id: int) -> Sequence[Loan]:
        with read_errors("loans"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT loan_id, loan_code, worker_id, category, status, remaining_amount,
                       installment_amount, installments, description
                FROM loans
                WHERE worker_id=%s AND status='active' AND remaining_amount > 0
                ORDER BY loan_id
                """,
                (worker_id,),
            )
            out = []
            for r in fetchall(cur):
                installments = tuple(
                    Installment(
                        number=int(i.get("installmentNumber") or n),
                        due_date=parse_d(i["dueDate"]),
                        amount=as_decimal(i.get("amount")),
                        paid_amount=as_decimal(i.get("paidAmount")),
                        status=InstallmentStatus(i.get("status") or InstallmentStatus.PENDING.value),
                    )
                    for n, i in enumerate(load_json(r.get("installments"), default=[]), start=1)
                )
                installment_amount = r.get("installment_amount")
                out.append(
                    Loan(
                        loan_id=int(r["loan_id"]),
                        loan_code=r.get("loan_code") or str(r["loan_id"]),
                        worker_id=int(r["worker_id"]),
                        category=LoanCategory(r.get("category") or LoanCategory.LOAN.value),
                        status=LoanStatus(r.get("status") or LoanStatus.ACTIVE.value),
                        remaining_amount=as_decimal(r.get("remaining_amount")),
                        installment_amount=as_decimal(installment_amount) if installment_amount is not None else None,
                        installments=installments,
                        description=r.get("description"),
                    )
                )
            return out
