from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..core.enums import ClockAction


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class CheckInResult:
    success: bool
    action: ClockAction
    time: datetime
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "action": self.action.value,
            "time": self.time.isoformat(),
            "message": self.message,
        }


@dataclass(frozen=True)
class CheckInStatus:
    has_checked_in: bool = False
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    lunch_out: Optional[datetime] = None
    lunch_in: Optional[datetime] = None
    check_in_method: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "hasCheckedIn": self.has_checked_in,
            "clockIn": _iso(self.clock_in),
            "clockOut": _iso(self.clock_out),
            "lunchOut": _iso(self.lunch_out),
            "lunchIn": _iso(self.lunch_in),
            "checkInMethod": self.check_in_method,
        }
