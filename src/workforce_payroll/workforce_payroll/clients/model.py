from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import (
    ALLOWED_MINUTE_INCREMENTS,
    DEFAULT_MAX_HOURS_PER_DAY,
    DEFAULT_MAX_OT_HOURS_PER_DAY,
    DEFAULT_MIN_HOURS_PER_DAY,
    DEFAULT_MINUTE_INCREMENT,
)
from ..core.enums import RoundingMethod
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class TimesheetSettings:
    """Per-client rules for turning clock times into paid hour buckets.

    Fixed for a pay period; callers resolve them worker -> project -> client and
    fall back to ``TimesheetSettings()`` when any link is missing.
    """

    minute_increment: int = DEFAULT_MINUTE_INCREMENT
    rounding_method: RoundingMethod = RoundingMethod.NEAREST
    min_hours_per_day: float = DEFAULT_MIN_HOURS_PER_DAY
    max_hours_per_day: float = DEFAULT_MAX_HOURS_PER_DAY
    allow_overtime: bool = True
    max_ot_hours_per_day: float = DEFAULT_MAX_OT_HOURS_PER_DAY

    def __post_init__(self):
        if self.minute_increment not in ALLOWED_MINUTE_INCREMENTS:
            raise ValidationError(f"minute_increment must be one of {ALLOWED_MINUTE_INCREMENTS}")
        if self.max_hours_per_day < 0 or self.max_ot_hours_per_day < 0:
            raise ValidationError("Daily hour caps must not be negative")


@dataclass(frozen=True)
class Client:
    client_id: int
    name: str
    timesheet_settings: TimesheetSettings = field(default_factory=TimesheetSettings)
    company_id: Optional[str] = None
