from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import PayrollRecord, UnitRecord


class UnitRecordRepository(Protocol):
    def list_approved(self, worker_id: int, start: date, end: date) -> Sequence[UnitRecord]:
        raise NotImplementedError


class PayrollRepository(Protocol):
    def create(self, record: PayrollRecord) -> int:
        """Insert a draft record; raises ConflictError if the worker already has one for the period."""

        raise NotImplementedError
