from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json
from .model import PayrollRecord
from .repository import PayrollRepository


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, record: PayrollRecord) -> int:
        d = record.deductions
        g = record.gross
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_records(
                    worker_id, company_id, period_start, period_end, payment_type,
                    base_pay, total_allowances, gross_pay,
                    total_normal_hours, total_ot1_5_hours, total_ot2_0_hours,
                    epf_employee, epf_employer, socso_employee, socso_employer, eis_employee, eis_employer,
                    custom_deductions, total_custom_deductions, loan_deductions, total_loan_deductions,
                    other_deductions, total_other_deductions, total_deductions, net_pay,
                    deduction_config_type, deduction_config_source, status
                )
                VALUES(%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s,
                       %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    record.worker_id,
                    record.company_id,
                    record.period_start,
                    record.period_end,
                    g.payment_type.value,
                    g.base_pay,
                    g.total_allowances,
                    d.gross_pay,
                    g.normal_hours,
                    g.ot1_5_hours,
                    g.ot2_0_hours,
                    d.epf.employee,
                    d.epf.employer,
                    d.socso.employee,
                    d.socso.employer,
                    d.eis.employee,
                    d.eis.employer,
                    dump_json([c.to_dict() for c in d.custom_deductions]),
                    d.total_custom_deductions,
                    dump_json([l.to_dict() for l in d.loan_deductions]),
                    d.total_loan_deductions,
                    dump_json([o.to_dict() for o in d.other_deductions]),
                    d.total_other_deductions,
                    d.total_deductions,
                    d.net_pay,
                    d.deduction_config_type.value if d.deduction_config_type else None,
                    d.deduction_config_source,
                    record.status.value,
                ),
            )
            return int(cur.lastrowid)
