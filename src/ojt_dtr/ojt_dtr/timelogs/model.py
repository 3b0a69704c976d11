from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from ..common.datetime_utils import TimeValue
from ..core.enums import HalfDaySession


@dataclass(frozen=True)
class Present:
    """A clocked day: full, under or over the daily target."""

    time_in: TimeValue = None
    time_out: TimeValue = None
    lunch_start: TimeValue = None
    lunch_end: TimeValue = None


@dataclass(frozen=True)
class HalfDay:
    session: HalfDaySession = HalfDaySession.AM


@dataclass(frozen=True)
class Absent:
    pass


DayStatus = Union[Present, HalfDay, Absent]


def parse_session(value: Any) -> HalfDaySession:
    if isinstance(value, HalfDaySession):
        return value
    try:
        return HalfDaySession(str(value).strip().upper())
    except ValueError:
        return HalfDaySession.AM


def day_status_from_fields(fields: Mapping[str, Any]) -> DayStatus:
    """Build the tagged status from flat row/form fields.

    ``absent`` wins over ``half_day`` when both flags are set.
    """

    if fields.get("absent"):
        return Absent()
    if fields.get("half_day"):
        return HalfDay(session=parse_session(fields.get("half_day_session")))
    return Present(
        time_in=fields.get("time_in") or None,
        time_out=fields.get("time_out") or None,
        lunch_start=fields.get("lunch_start") or None,
        lunch_end=fields.get("lunch_end") or None,
    )


@dataclass(frozen=True)
class DayRecord:
    """Thực thể miền (domain): Bản ghi DTR của một ngày.

    ``hours_rendered`` is derived at save time and persisted for fast reads.
    """

    log_date: date
    status: DayStatus = field(default_factory=Present)
    hours_rendered: Decimal = Decimal("0")
    remarks: Optional[str] = None
    record_id: Optional[int] = None
    student_id: Optional[int] = None

    @property
    def is_absent(self) -> bool:
        return isinstance(self.status, Absent)

    @property
    def is_half_day(self) -> bool:
        return isinstance(self.status, HalfDay)

    @property
    def half_day_session(self) -> Optional[HalfDaySession]:
        return self.status.session if isinstance(self.status, HalfDay) else None

    @property
    def time_in(self) -> TimeValue:
        return self.status.time_in if isinstance(self.status, Present) else None

    @property
    def time_out(self) -> TimeValue:
        return self.status.time_out if isinstance(self.status, Present) else None

    @property
    def lunch_start(self) -> TimeValue:
        return self.status.lunch_start if isinstance(self.status, Present) else None

    @property
    def lunch_end(self) -> TimeValue:
        return self.status.lunch_end if isinstance(self.status, Present) else None


@dataclass(frozen=True)
class CumulativeRow:
    """Read-model for the log table: one record with running totals."""

    record: DayRecord
    hours: Decimal
    cumulative: Decimal
    remaining: Decimal
