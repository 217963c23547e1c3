from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, read_errors
from .model import STANDARD_OVERTIME_RATES, OvertimeRates
from .repository import CompanyRepository


class MySQLCompanyRepository(CompanyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def overtime_rates(self, company_id: str) -> OvertimeRates:
        with read_errors("company"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT ot1_5_rate, ot2_0_rate FROM companies WHERE company_id=%s",
                (company_id,),
            )
            r = fetchone(cur)
            if not r:
                return STANDARD_OVERTIME_RATES
            return OvertimeRates.with_overrides(r.get("ot1_5_rate"), r.get("ot2_0_rate"))
