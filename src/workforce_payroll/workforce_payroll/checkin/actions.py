from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional, TypeVar

from ..core.enums import ClockAction
from ..core.exceptions import ValidationError

# Attendance records and timesheet entries share these attribute names.
ACTION_FIELDS: dict[ClockAction, str] = {
    ClockAction.CLOCK_IN: "clock_in",
    ClockAction.CLOCK_OUT: "clock_out",
    ClockAction.LUNCH_OUT: "lunch_out",
    ClockAction.LUNCH_IN: "lunch_in",
}

ACTION_MESSAGES: dict[ClockAction, str] = {
    ClockAction.CLOCK_IN: "clocked in",
    ClockAction.CLOCK_OUT: "clocked out",
    ClockAction.LUNCH_OUT: "started lunch break",
    ClockAction.LUNCH_IN: "ended lunch break",
}

T = TypeVar("T")


def parse_action(value: Optional[str]) -> ClockAction:
    try:
        return ClockAction(value)
    except ValueError:
        raise ValidationError("Invalid action. Must be: clockIn, clockOut, lunchOut, or lunchIn") from None


def action_message(action: ClockAction) -> str:
    return ACTION_MESSAGES[action]


def stamped(record: T, action: ClockAction, when: datetime) -> T:
    """Copy of ``record`` with the timestamp field for ``action`` set."""
    return replace(record, **{ACTION_FIELDS[action]: when})


def stamp_of(record: object, action: ClockAction) -> Optional[datetime]:
    return getattr(record, ACTION_FIELDS[action])
