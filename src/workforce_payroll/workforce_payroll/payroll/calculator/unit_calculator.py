from __future__ import annotations

from datetime import date

from ...common.money import total
from ...core.enums import PaymentType
from ...core.exceptions import ValidationError
from ...workers.model import Worker
from ..model import GrossPay
from ..repository import UnitRecordRepository
from .base import GrossPayCalculator


class UnitBasedCalculator(GrossPayCalculator):
    def __init__(self, unit_records: UnitRecordRepository):
        self._unit_records = unit_records

    def base_pay(self, worker: Worker, period_start: date, period_end: date) -> GrossPay:
        records = self._unit_records.list_approved(worker.worker_id, period_start, period_end)
        if not records:
            raise ValidationError("No approved unit records found for this period")

        return GrossPay(
            payment_type=PaymentType.UNIT_BASED,
            base_pay=total(r.total_amount for r in records),
            source_ids=tuple(r.unit_record_id for r in records),
        )
