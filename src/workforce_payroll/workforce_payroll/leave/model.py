from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class LeaveRequest:
    leave_id: int
    worker_id: int
    start_date: date
    end_date: date
    total_days: float
    leave_type_name: str
    is_paid: bool = True
    leave_code: Optional[str] = None
    status: str = "approved"


@dataclass(frozen=True)
class Holiday:
    company_id: str
    date: date
    name: str
    is_working_day: bool = False


@dataclass(frozen=True)
class LeaveDays:
    paid: float = 0.0
    unpaid: float = 0.0
