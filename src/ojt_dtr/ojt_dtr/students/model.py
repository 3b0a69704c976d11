from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..core import constants


@dataclass(frozen=True)
class StudentConfig:
    """Hour targets and default clock values owned by a student."""

    required_hours: Decimal = constants.DEFAULT_REQUIRED_HOURS
    hours_per_day: Decimal = constants.DEFAULT_HOURS_PER_DAY
    days_per_week: int = constants.DEFAULT_DAYS_PER_WEEK
    default_time_in: str = constants.DEFAULT_TIME_IN
    default_time_out: str = constants.DEFAULT_TIME_OUT
    lunch_start: str = constants.DEFAULT_LUNCH_START
    lunch_end: str = constants.DEFAULT_LUNCH_END
    allow_overtime: bool = False

    @property
    def hours_per_week(self) -> Decimal:
        return self.hours_per_day * self.days_per_week


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Sinh viên thực tập (OJT).

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    student_id: int
    student_code: str
    full_name: str
    school: Optional[str] = None
    company: Optional[str] = None
    config: StudentConfig = field(default_factory=StudentConfig)
