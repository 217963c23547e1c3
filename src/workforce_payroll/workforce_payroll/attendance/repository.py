from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_worker_and_date(self, worker_id: int, work_date: date) -> Optional[AttendanceRecord]:
        """Raises StoreReadError when the store cannot be read."""

        raise NotImplementedError

    def create(self, record: AttendanceRecord) -> int:
        """Insert a record; raises ConflictError if (worker, date) already exists."""

        raise NotImplementedError

    def patch(self, attendance_id: int, fields: Mapping[str, Any]) -> bool:
        """Update only the named columns (model attribute names)."""

        raise NotImplementedError
