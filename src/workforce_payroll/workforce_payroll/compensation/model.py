from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..core.constants import (
    DEFAULT_EIS_EMPLOYEE_RATE,
    DEFAULT_EIS_EMPLOYER_RATE,
    DEFAULT_EPF_EMPLOYEE_RATE,
    DEFAULT_EPF_EMPLOYER_RATE,
    DEFAULT_SOCSO_EMPLOYEE_RATE,
    DEFAULT_SOCSO_EMPLOYER_RATE,
)
from ..core.enums import AmountType, DeductionConfigType


@dataclass(frozen=True)
class CustomDeduction:
    name: str
    amount: Decimal
    type: AmountType = AmountType.FIXED
    description: Optional[str] = None


@dataclass(frozen=True)
class StatutoryRates:
    """Employee/employer percentage pair for one statutory scheme."""

    enabled: bool = True
    employee_rate: Decimal = Decimal("0")
    employer_rate: Decimal = Decimal("0")


@dataclass(frozen=True)
class DeductionConfig:
    """Deduction settings attached to a worker group or a job band.

    ``group_name`` / ``job_band_name`` are denormalised for audit display.
    """

    config_type: DeductionConfigType
    group_id: Optional[int] = None
    group_name: Optional[str] = None
    job_band_id: Optional[int] = None
    job_band_name: Optional[str] = None
    epf: StatutoryRates = StatutoryRates(True, DEFAULT_EPF_EMPLOYEE_RATE, DEFAULT_EPF_EMPLOYER_RATE)
    socso: StatutoryRates = StatutoryRates(True, DEFAULT_SOCSO_EMPLOYEE_RATE, DEFAULT_SOCSO_EMPLOYER_RATE)
    eis: StatutoryRates = StatutoryRates(True, DEFAULT_EIS_EMPLOYEE_RATE, DEFAULT_EIS_EMPLOYER_RATE)
    custom_deductions: tuple[CustomDeduction, ...] = field(default_factory=tuple)

    @property
    def source_name(self) -> Optional[str]:
        if self.config_type == DeductionConfigType.GROUP:
            return self.group_name
        return self.job_band_name


PLATFORM_DEFAULT_RATES = DeductionConfig(config_type=DeductionConfigType.BAND)


@dataclass(frozen=True)
class CompensationConfig:
    company_id: str
    deduction_configs: tuple[DeductionConfig, ...] = field(default_factory=tuple)
