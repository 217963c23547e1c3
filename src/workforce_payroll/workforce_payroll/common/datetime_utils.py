from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def week_start(day: date) -> date:
    """Monday of the ISO week containing ``day``; Sunday belongs to the prior week."""
    return day - timedelta(days=day.weekday())


def on_date(value: Optional[datetime], day: date) -> Optional[datetime]:
    """Re-anchor a timestamp's time-of-day onto ``day``."""
    if value is None:
        return None
    return datetime.combine(day, value.time())


def weekdays_between(start: date, end: date) -> list[date]:
    """Mon-Fri dates in the inclusive range."""
    out: list[date] = []
    d = start
    while d <= end:
        if d.weekday() < 5:
            out.append(d)
        d += timedelta(days=1)
    return out
