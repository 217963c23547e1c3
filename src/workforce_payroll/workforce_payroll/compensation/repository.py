from __future__ import annotations

from typing import Optional, Protocol

from .model import CompensationConfig


class CompensationConfigRepository(Protocol):
    def get_for_company(self, company_id: str) -> Optional[CompensationConfig]:
        raise NotImplementedError
