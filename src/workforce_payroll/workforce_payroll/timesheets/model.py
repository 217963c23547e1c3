from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import Any, Mapping, Optional

from ..core.constants import DAY_LABELS, DAYS_PER_WEEK
from ..core.enums import CheckInMethod, PaymentType, TimesheetStatus
from ..core.exceptions import ValidationError

PUBLIC_HOLIDAY = "PH"


@dataclass(frozen=True)
class QRCheckIn:
    qr_code_data: str
    timestamp: datetime
    location: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class DailyEntry:
    """One calendar day inside a weekly timesheet.

    Hour fields are derived by the rounding engine; absent days carry zero hours
    and a public-holiday leave code overrides any clock data.
    """

    date: date
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    lunch_out: Optional[datetime] = None
    lunch_in: Optional[datetime] = None
    normal_hours: float = 0.0
    ot1_5_hours: float = 0.0
    ot2_0_hours: float = 0.0
    total_hours: float = 0.0
    is_absent: bool = False
    leave_type: Optional[str] = None
    check_in_method: CheckInMethod = CheckInMethod.MANUAL
    qr_code_check_in: Optional[QRCheckIn] = None
    notes: Optional[str] = None

    @property
    def day_of_week(self) -> str:
        return DAY_LABELS[self.date.weekday()]

    @property
    def is_public_holiday(self) -> bool:
        return self.leave_type == PUBLIC_HOLIDAY

    def zeroed(self) -> "DailyEntry":
        return replace(self, normal_hours=0.0, ot1_5_hours=0.0, ot2_0_hours=0.0, total_hours=0.0)


@dataclass(frozen=True)
class WeeklyTimesheet:
    """Per-worker, per-ISO-week timesheet. Totals are always derived from entries."""

    timesheet_id: Optional[int]
    worker_id: int
    company_id: Optional[str]
    week_start_date: date
    daily_entries: tuple[DailyEntry, ...] = field(default_factory=tuple)
    total_normal_hours: float = 0.0
    total_ot1_5_hours: float = 0.0
    total_ot2_0_hours: float = 0.0
    total_hours: float = 0.0
    status: TimesheetStatus = TimesheetStatus.DRAFT
    payment_type: Optional[PaymentType] = None

    @property
    def week_end_date(self) -> date:
        return self.week_start_date + timedelta(days=6)

    def covers(self, day: date) -> bool:
        return self.week_start_date <= day <= self.week_end_date

    def entry_for(self, day: date) -> Optional[DailyEntry]:
        for e in self.daily_entries:
            if e.date == day:
                return e
        return None

    def with_entry(self, entry: DailyEntry) -> "WeeklyTimesheet":
        """Replace the entry for ``entry.date`` (or append it) and recompute totals."""
        if not self.covers(entry.date):
            raise ValidationError(
                f"{entry.date.isoformat()} is outside week starting {self.week_start_date.isoformat()}"
            )
        entries = [e for e in self.daily_entries if e.date != entry.date]
        entries.append(entry)
        entries.sort(key=lambda e: e.date)
        return with_totals(replace(self, daily_entries=tuple(entries)))


def with_totals(timesheet: WeeklyTimesheet) -> WeeklyTimesheet:
    entries = timesheet.daily_entries
    normal = sum(e.normal_hours for e in entries)
    ot1 = sum(e.ot1_5_hours for e in entries)
    ot2 = sum(e.ot2_0_hours for e in entries)
    return replace(
        timesheet,
        total_normal_hours=normal,
        total_ot1_5_hours=ot1,
        total_ot2_0_hours=ot2,
        total_hours=normal + ot1 + ot2,
    )


def empty_week(*, worker_id: int, company_id: Optional[str], week_start_date: date,
               payment_type: Optional[PaymentType] = None) -> WeeklyTimesheet:
    entries = tuple(DailyEntry(date=week_start_date + timedelta(days=i)) for i in range(DAYS_PER_WEEK))
    return WeeklyTimesheet(
        timesheet_id=None,
        worker_id=worker_id,
        company_id=company_id,
        week_start_date=week_start_date,
        daily_entries=entries,
        payment_type=payment_type,
    )
