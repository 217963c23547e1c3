from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Holiday, LeaveRequest


class LeaveRepository(Protocol):
    def list_approved_overlapping(self, worker_id: int, start: date, end: date) -> Sequence[LeaveRequest]:
        raise NotImplementedError


class HolidayRepository(Protocol):
    def list_for_company(self, company_id: str, start: date, end: date) -> Sequence[Holiday]:
        raise NotImplementedError
