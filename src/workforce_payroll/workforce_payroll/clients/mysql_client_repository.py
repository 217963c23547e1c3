from __future__ import annotations

from typing import Optional

from ..core.constants import (
    DEFAULT_MAX_HOURS_PER_DAY,
    DEFAULT_MAX_OT_HOURS_PER_DAY,
    DEFAULT_MIN_HOURS_PER_DAY,
    DEFAULT_MINUTE_INCREMENT,
)
from ..core.enums import RoundingMethod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, read_errors
from .model import Client, TimesheetSettings
from .repository import ClientRepository


def _float(value, default: float) -> float:
    return float(value) if value is not None else default


class MySQLClientRepository(ClientRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, client_id: int) -> Optional[Client]:
        with read_errors("client"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT client_id, name, company_id, minute_increment, rounding_method,
                       min_hours_per_day, max_hours_per_day, allow_overtime, max_ot_hours_per_day
                FROM clients
                WHERE client_id=%s
                """,
                (client_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            settings = TimesheetSettings(
                minute_increment=int(r.get("minute_increment") or DEFAULT_MINUTE_INCREMENT),
                rounding_method=RoundingMethod(r.get("rounding_method") or RoundingMethod.NEAREST.value),
                min_hours_per_day=_float(r.get("min_hours_per_day"), DEFAULT_MIN_HOURS_PER_DAY),
                max_hours_per_day=_float(r.get("max_hours_per_day"), DEFAULT_MAX_HOURS_PER_DAY),
                allow_overtime=bool(r.get("allow_overtime", True)),
                max_ot_hours_per_day=_float(r.get("max_ot_hours_per_day"), DEFAULT_MAX_OT_HOURS_PER_DAY),
            )
            company_id = r.get("company_id")
            return Client(
                client_id=int(r["client_id"]),
                name=r["name"],
                timesheet_settings=settings,
                company_id=str(company_id) if company_id is not None else None,
            )

    def get_client_id_for_project(self, project_id: int) -> Optional[int]:
        with read_errors("project"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT client_id FROM projects WHERE project_id=%s", (project_id,))
            r = fetchone(cur)
            if not r or r.get("client_id") is None:
                return None
            return int(r["client_id"])
