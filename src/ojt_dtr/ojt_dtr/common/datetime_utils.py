from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Union

TimeValue = Union[time, timedelta, str, None]

SATURDAY = 5
SUNDAY = 6


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value: TimeValue) -> Optional[time]:
    """Parse a time-of-day leniently.

    Accepts ``datetime.time``, a ``timedelta`` (MySQL TIME columns) or an
    ``HH:MM`` / ``HH:MM:SS`` string. Anything unparsable yields None, which
    callers treat as "no time recorded".
    """

    if value is None:
        return None
    if isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds())
        if total_seconds < 0 or total_seconds >= 86400:
            return None
        return time(hour=total_seconds // 3600, minute=(total_seconds % 3600) // 60)
    if isinstance(value, str):
        v = value.strip()
        for fmt in ("%H:%M", "%H:%M:%S"):
            try:
                return datetime.strptime(v, fmt).time()
            except ValueError:
                continue
    return None


def minutes_of_day(t: time) -> int:
    # Seconds are dropped: the engine works at minute precision.
    return t.hour * 60 + t.minute


def format_hhmm(t: Optional[time]) -> Optional[str]:
    return t.strftime("%H:%M") if t else None


def week_start(d: date) -> date:
    """Sunday on or before ``d`` (weeks run Sunday to Saturday)."""
    return d - timedelta(days=(d.weekday() + 1) % 7)


def is_weekend(d: date) -> bool:
    return d.weekday() in (SATURDAY, SUNDAY)


def nth_weekday_after(from_date: date, n: int) -> date:
    """The ``n``-th Monday-Friday date strictly after ``from_date``.

    Any 7 consecutive days hold exactly 5 weekdays, so whole weeks are
    skipped in one step and only the remainder is walked.
    Raises OverflowError when the result would pass ``date.max``.
    """

    if n < 1:
        raise ValueError("n must be at least 1")
    full_weeks, rest = divmod(n - 1, 5)
    cur = from_date + timedelta(weeks=full_weeks)
    rest += 1
    while rest:
        cur += timedelta(days=1)
        if not is_weekend(cur):
            rest -= 1
    return cur


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
