from __future__ import annotations

from typing import Any, Optional

from ..core.constants import (
    DEFAULT_EIS_EMPLOYEE_RATE,
    DEFAULT_EIS_EMPLOYER_RATE,
    DEFAULT_EPF_EMPLOYEE_RATE,
    DEFAULT_EPF_EMPLOYER_RATE,
    DEFAULT_SOCSO_EMPLOYEE_RATE,
    DEFAULT_SOCSO_EMPLOYER_RATE,
)
from ..core.enums import AmountType, DeductionConfigType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchone, load_json, read_errors
from .model import CompensationConfig, CustomDeduction, DeductionConfig, StatutoryRates
from .repository import CompensationConfigRepository


def _rates(d: dict[str, Any], prefix: str, employee_default, employer_default) -> StatutoryRates:
    employee = d.get(f"{prefix}EmployeeRate")
    employer = d.get(f"{prefix}EmployerRate")
    return StatutoryRates(
        enabled=d.get(f"{prefix}Enabled") is not False,
        employee_rate=as_decimal(employee) if employee is not None else employee_default,
        employer_rate=as_decimal(employer) if employer is not None else employer_default,
    )


def deduction_config_from_dict(d: dict[str, Any]) -> DeductionConfig:
    return DeductionConfig(
        config_type=DeductionConfigType(d.get("configType") or DeductionConfigType.BAND.value),
        group_id=d.get("group"),
        group_name=d.get("groupName"),
        job_band_id=d.get("jobBand"),
        job_band_name=d.get("jobBandName"),
        epf=_rates(d, "epf", DEFAULT_EPF_EMPLOYEE_RATE, DEFAULT_EPF_EMPLOYER_RATE),
        socso=_rates(d, "socso", DEFAULT_SOCSO_EMPLOYEE_RATE, DEFAULT_SOCSO_EMPLOYER_RATE),
        eis=_rates(d, "eis", DEFAULT_EIS_EMPLOYEE_RATE, DEFAULT_EIS_EMPLOYER_RATE),
        custom_deductions=tuple(
            CustomDeduction(
                name=str(c.get("name") or ""),
                amount=as_decimal(c.get("amount")),
                type=AmountType(c.get("type") or AmountType.FIXED.value),
                description=c.get("description"),
            )
            for c in d.get("customDeductions") or []
        ),
    )


class MySQLCompensationConfigRepository(CompensationConfigRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_company(self, company_id: str) -> Optional[CompensationConfig]:
        with read_errors("compensation config"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT company_id, deduction_configs FROM compensation_configs WHERE company_id=%s",
                (company_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return CompensationConfig(
                company_id=str(r["company_id"]),
                deduction_configs=tuple(
                    deduction_config_from_dict(d) for d in load_json(r.get("deduction_configs"), default=[])
                ),
            )
