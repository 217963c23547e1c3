from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..clients.model import TimesheetSettings
from ..common.datetime_utils import on_date
from ..core.constants import OT_TIER1_HOURS
from ..core.exceptions import ValidationError
from .model import DailyEntry
from .rounding.factory import RoundingStrategyFactory


@dataclass(frozen=True)
class HourBuckets:
    normal_hours: float = 0.0
    ot1_5_hours: float = 0.0
    ot2_0_hours: float = 0.0
    total_hours: float = 0.0


ZERO_HOURS = HourBuckets()


class HoursCalculator:
    """Turns one day's clock times into normal / OT 1.5x / OT 2.0x hours.

    Steps: re-anchor every timestamp on the entry date, subtract a well-formed
    lunch break, round the worked minutes with the client's increment and method,
    then split at the daily cap. ``total_hours`` is always the sum of the three
    buckets, so hours beyond the caps are dropped rather than reported.
    """

    def __init__(self, *, factory: Optional[RoundingStrategyFactory] = None):
        self._factory = factory or RoundingStrategyFactory()

    def worked_minutes(self, entry: DailyEntry) -> Optional[float]:
        clock_in = on_date(entry.clock_in, entry.date)
        clock_out = on_date(entry.clock_out, entry.date)
        if clock_in is None or clock_out is None:
            return None
        if clock_out < clock_in:
            raise ValidationError(
                f"Clock-out {clock_out:%H:%M} is before clock-in {clock_in:%H:%M} on {entry.date.isoformat()}"
            )

        minutes = (clock_out - clock_in).total_seconds() / 60

        lunch_out = on_date(entry.lunch_out, entry.date)
        lunch_in = on_date(entry.lunch_in, entry.date)
        if lunch_out is not None and lunch_in is not None and lunch_in > lunch_out:
            minutes -= (lunch_in - lunch_out).total_seconds() / 60

        return max(minutes, 0.0)

    def compute(self, entry: DailyEntry, settings: TimesheetSettings) -> HourBuckets:
        minutes = self.worked_minutes(entry)
        if minutes is None:
            return ZERO_HOURS

        strategy = self._factory.for_method(settings.rounding_method)
        hours = strategy.round_minutes(minutes, settings.minute_increment) / 60
        return split_hours(hours, settings)

    def apply(self, entry: DailyEntry, settings: TimesheetSettings) -> DailyEntry:
        """Entry with hour fields recomputed; absent and public-holiday days carry none."""
        if entry.is_absent or entry.is_public_holiday:
            return entry.zeroed()
        b = self.compute(entry, settings)
        return replace(
            entry,
            normal_hours=b.normal_hours,
            ot1_5_hours=b.ot1_5_hours,
            ot2_0_hours=b.ot2_0_hours,
            total_hours=b.total_hours,
        )


def split_hours(hours: float, settings: TimesheetSettings) -> HourBuckets:
    hours = max(hours, 0.0)
    cap = max(settings.max_hours_per_day, 0.0)

    if hours <= cap:
        return HourBuckets(normal_hours=hours, total_hours=hours)

    # Over the cap without overtime allowed: excess is simply not paid.
    if not settings.allow_overtime:
        return HourBuckets(normal_hours=cap, total_hours=cap)

    ot = min(hours - cap, max(settings.max_ot_hours_per_day, 0.0))
    ot1 = min(ot, OT_TIER1_HOURS)
    ot2 = max(ot - ot1, 0.0)
    return HourBuckets(normal_hours=cap, ot1_5_hours=ot1, ot2_0_hours=ot2, total_hours=cap + ot1 + ot2)


def compute_hours(entry: DailyEntry, settings: TimesheetSettings) -> HourBuckets:
    return HoursCalculator().compute(entry, settings)
