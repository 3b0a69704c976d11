"""Aggregation and projection over a student's day records.

All functions are pure: they take records already fetched from the store and
never mutate them. Records may arrive in any order.
"""

from __future__ import annotations

import math
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Sequence

from ..common.datetime_utils import nth_weekday_after, week_start
from ..common.validators import to_decimal
from ..core.constants import COMPLETED, DEFAULT_DAYS_PER_WEEK, DEFAULT_HOURS_PER_DAY
from ..core.enums import DayType, HalfDaySession
from ..core.exceptions import InvalidConfiguration
from ..timelogs.model import CumulativeRow, DayRecord
from .model import Progress, Projection, WeekSummary

HUNDRED = Decimal("100")
ZERO = Decimal("0")


def _hours(record: DayRecord) -> Decimal:
    return to_decimal(record.hours_rendered)


def total_hours(records: Iterable[DayRecord]) -> Decimal:
    return sum((_hours(r) for r in records), ZERO)


def progress(total: Any, required: Any) -> Progress:
    total_d = to_decimal(total)
    required_d = to_decimal(required)
    if required_d <= 0:
        raise InvalidConfiguration("required_hours must be greater than 0")

    percent = min(HUNDRED, HUNDRED * total_d / required_d)
    remaining = max(ZERO, required_d - total_d)
    return Progress(percent_complete=percent, remaining_hours=remaining)


def days_needed(remaining: Any, hours_per_day: Any) -> int:
    remaining_d = to_decimal(remaining)
    hpd = to_decimal(hours_per_day)
    if hpd <= 0:
        raise InvalidConfiguration("hours_per_day must be greater than 0")
    if remaining_d <= 0:
        return 0
    return math.ceil(remaining_d / hpd)


def project_completion_date(from_date: date, remaining: Any, hours_per_day: Any) -> Projection:
    """Last of the weekdays needed to cover ``remaining`` hours after ``from_date``.

    Always skips Saturday and Sunday, whatever the student's days_per_week.
    """

    n = days_needed(remaining, hours_per_day)
    if n == 0:
        return COMPLETED
    try:
        return nth_weekday_after(from_date, n)
    except OverflowError:
        raise InvalidConfiguration(f"Completion is {n} working days away, past the last representable date")


def weekly_breakdown(
    records: Iterable[DayRecord],
    *,
    days_per_week: int = DEFAULT_DAYS_PER_WEEK,
    hours_per_day: Any = DEFAULT_HOURS_PER_DAY,
) -> list[WeekSummary]:
    """Bucket records into Sunday-aligned weeks, most recent week first."""

    target = to_decimal(hours_per_day) * int(days_per_week)
    weeks: dict[date, WeekSummary] = {}

    for r in records:
        key = week_start(r.log_date)
        w = weeks.get(key)
        if not w:
            w = WeekSummary(week_start=key, target=target)
            weeks[key] = w

        w.hours += _hours(r)
        if r.is_absent:
            w.absent_count += 1
        elif r.is_half_day:
            w.half_day_count += 1
        else:
            w.full_day_count += 1

    return sorted(weeks.values(), key=lambda w: w.week_start, reverse=True)


def classify_day(record: DayRecord, hours_per_day: Any) -> DayType:
    if record.is_absent:
        return DayType.ABSENT
    if record.is_half_day:
        if record.half_day_session == HalfDaySession.PM:
            return DayType.HALF_PM
        return DayType.HALF_AM

    hours = _hours(record)
    hpd = to_decimal(hours_per_day)
    if hours > hpd:
        return DayType.OVERTIME
    if ZERO < hours < hpd:
        return DayType.UNDER
    return DayType.FULL


def day_delta(record: DayRecord, hours_per_day: Any) -> Decimal:
    """Hours above (positive) or below (negative) the daily target.

    Only OVERTIME and UNDER days carry a delta; everything else is 0.
    """

    day_type = classify_day(record, hours_per_day)
    if day_type in (DayType.OVERTIME, DayType.UNDER):
        return _hours(record) - to_decimal(hours_per_day)
    return ZERO


def cumulative_log(records: Sequence[DayRecord], required_hours: Any) -> list[CumulativeRow]:
    """Records ascending by date with running total and remaining hours."""

    required_d = to_decimal(required_hours)
    rows: list[CumulativeRow] = []
    cum = ZERO
    for r in sorted(records, key=lambda r: r.log_date):
        hours = _hours(r)
        cum += hours
        rows.append(CumulativeRow(record=r, hours=hours, cumulative=cum, remaining=max(ZERO, required_d - cum)))
    return rows
