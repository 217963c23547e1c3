from decimal import Decimal

from src.workforce_payroll.workforce_payroll.compensation.model import (
    PLATFORM_DEFAULT_RATES,
    DeductionConfig,
    StatutoryRates,
)
from src.workforce_payroll.workforce_payroll.compensation.mysql_compensation_repository import (
    deduction_config_from_dict,
)
from src.workforce_payroll.workforce_payroll.compensation.resolver import resolve_deduction_config
from src.workforce_payroll.workforce_payroll.core.enums import AmountType, DeductionConfigType, PaymentType
from src.workforce_payroll.workforce_payroll.workers.model import Worker

GROUP = DeductionConfig(
    config_type=DeductionConfigType.GROUP,
    group_id=1,
    group_name="Site Crew",
    epf=StatutoryRates(True, Decimal("9"), Decimal("13")),
)
BAND = DeductionConfig(
    config_type=DeductionConfigType.BAND,
    job_band_id=2,
    job_band_name="Band B",
    epf=StatutoryRates(True, Decimal("7"), Decimal("12")),
)


def _worker(group=None, band=None):
    return Worker(worker_id=1, company=1, payment_type=PaymentType.HOURLY, worker_group_id=group, job_band_id=band)


def test_group_config_wins_over_band():
    resolved = resolve_deduction_config(_worker(group=1, band=2), [BAND, GROUP])

    assert resolved.config is GROUP
    assert resolved.source_kind == DeductionConfigType.GROUP
    assert resolved.source_name == "Site Crew"


def test_band_config_used_without_group_match():
    resolved = resolve_deduction_config(_worker(group=99, band=2), [GROUP, BAND])

    assert resolved.config is BAND
    assert resolved.source_kind == DeductionConfigType.BAND
    assert resolved.source_name == "Band B"


def test_platform_defaults_when_nothing_matches():
    resolved = resolve_deduction_config(_worker(), [GROUP, BAND])

    assert resolved.is_default
    assert resolved.config is PLATFORM_DEFAULT_RATES
    assert resolved.source_name is None
    assert resolved.config.epf == StatutoryRates(True, Decimal("11"), Decimal("12"))
    assert resolved.config.socso == StatutoryRates(True, Decimal("0.5"), Decimal("1.75"))
    assert resolved.config.eis == StatutoryRates(True, Decimal("0.2"), Decimal("0.2"))


def test_config_document_parsing_applies_defaults_for_missing_rates():
    config = deduction_config_from_dict(
        {
            "configType": "band",
            "jobBand": 4,
            "jobBandName": "Band D",
            "socsoEnabled": False,
            "epfEmployeeRate": 8,
            "customDeductions": [{"name": "Uniform", "amount": 15, "type": "fixed"}],
        }
    )

    assert config.job_band_id == 4
    assert config.epf.employee_rate == Decimal("8")
    assert config.epf.employer_rate == Decimal("12")
    assert config.socso.enabled is False
    assert config.custom_deductions[0].type == AmountType.FIXED
    assert config.custom_deductions[0].amount == Decimal("15")
