from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..core.enums import AttendanceStatus, CheckInMethod


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one day of attendance for a monthly-salary worker."""

    attendance_id: Optional[int]
    worker_id: int
    company_id: Optional[str]
    work_date: date
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    lunch_out: Optional[datetime] = None
    lunch_in: Optional[datetime] = None
    check_in_method: CheckInMethod = CheckInMethod.MANUAL
    qr_code_data: Optional[str] = None
    location: Optional[Mapping[str, Any]] = None
    status: AttendanceStatus = AttendanceStatus.PRESENT
    note: Optional[str] = None
