from __future__ import annotations

from typing import Protocol

from .model import OvertimeRates


class CompanyRepository(Protocol):
    def overtime_rates(self, company_id: str) -> OvertimeRates:
        raise NotImplementedError
