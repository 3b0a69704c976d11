from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from ..core.enums import DayType
from ..timelogs.model import DayRecord

Projection = Union[date, str]


@dataclass(frozen=True)
class Progress:
    percent_complete: Decimal
    remaining_hours: Decimal


@dataclass
class WeekSummary:
    """Rollup of one Sunday-aligned week."""

    week_start: date
    target: Decimal
    hours: Decimal = Decimal("0")
    full_day_count: int = 0
    half_day_count: int = 0
    absent_count: int = 0

    @property
    def meets_target(self) -> bool:
        return self.hours >= self.target

    @property
    def shortfall(self) -> Decimal:
        return Decimal("0") if self.meets_target else self.target - self.hours


@dataclass(frozen=True)
class RecentDay:
    record: DayRecord
    day_type: DayType
    delta: Decimal = Decimal("0")


@dataclass(frozen=True)
class TrackerSummary:
    """Read-model behind the progress tracker screen."""

    student_id: int
    total_hours: Decimal
    required_hours: Decimal
    percent_complete: Decimal
    remaining_hours: Decimal
    days_left: int
    weeks_left: Decimal
    projected_completion: Projection
    full_day_count: int
    half_day_count: int
    absent_count: int
    average_hours_per_week: Decimal
    weeks: list[WeekSummary] = field(default_factory=list)
    recent: list[RecentDay] = field(default_factory=list)


@dataclass(frozen=True)
class StudentOverview:
    student_id: int
    student_code: str
    full_name: str
    company: Optional[str]
    total_hours: Decimal
    remaining_hours: Decimal
    percent_complete: Decimal
    projected_completion: Optional[Projection]
