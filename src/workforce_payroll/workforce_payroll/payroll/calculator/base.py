from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import date

from ...common.money import total
from ...workers.model import Worker
from ..composer import resolve_amount
from ..model import GrossPay


class GrossPayCalculator(ABC):
    """Gross pay interface (Strategy Pattern per payment type).

    Subclasses compute the base pay; allowances are added on top here, with
    percentage allowances taken from the base.
    """

    def compute(self, worker: Worker, period_start: date, period_end: date) -> GrossPay:
        base = self.base_pay(worker, period_start, period_end)
        allowances = total(resolve_amount(a.amount, a.type, base.base_pay) for a in worker.allowances)
        return replace(base, total_allowances=allowances)

    @abstractmethod
    def base_pay(self, worker: Worker, period_start: date, period_end: date) -> GrossPay:
        raise NotImplementedError
