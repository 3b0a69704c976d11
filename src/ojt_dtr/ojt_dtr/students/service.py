from __future__ import annotations

import logging
import math
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping

from ..common.datetime_utils import format_hhmm, minutes_of_day
from ..common.validators import require_bool, require_int_range, require_positive, require_time
from ..core.constants import (
    HOURS_PLACES,
    MAX_DAYS_PER_WEEK,
    MAX_HOURS_PER_DAY,
    MAX_REQUIRED_HOURS,
    MIN_DAYS_PER_WEEK,
)
from ..core.exceptions import InvalidConfiguration, NotFoundError, ValidationError
from .model import StudentConfig
from .repository import StudentRepository

logger = logging.getLogger(__name__)

TIME_FIELDS = ("default_time_in", "default_time_out", "lunch_start", "lunch_end")


class SettingsService:
    """Use case: update a student's hour targets and default times."""

    def __init__(self, students: StudentRepository):
        self._students = students

    @staticmethod
    def _clean(partial: Mapping[str, Any]) -> dict:
        unknown = set(partial) - set(StudentConfig.__dataclass_fields__)
        if unknown:
            raise ValidationError(f"Unknown settings: {', '.join(sorted(unknown))}")

        cleaned: dict[str, Any] = {}
        if "required_hours" in partial:
            cleaned["required_hours"] = require_positive(
                partial["required_hours"], "required_hours", places=HOURS_PLACES, max_value=MAX_REQUIRED_HOURS
            )
        if "hours_per_day" in partial:
            cleaned["hours_per_day"] = require_positive(
                partial["hours_per_day"], "hours_per_day", places=HOURS_PLACES, max_value=MAX_HOURS_PER_DAY
            )
        if "days_per_week" in partial:
            cleaned["days_per_week"] = require_int_range(
                partial["days_per_week"], "days_per_week", MIN_DAYS_PER_WEEK, MAX_DAYS_PER_WEEK
            )
        for name in TIME_FIELDS:
            if name in partial:
                cleaned[name] = format_hhmm(require_time(partial[name], name))
        if "allow_overtime" in partial:
            cleaned["allow_overtime"] = require_bool(partial["allow_overtime"], "allow_overtime")
        return cleaned

    def get_settings(self, student_id: int) -> StudentConfig:
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise NotFoundError("Student not found")
        return student.config

    def update_settings(self, student_id: int, partial: Mapping[str, Any]) -> StudentConfig:
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise NotFoundError("Student not found")

        cleaned = self._clean(partial)
        if not cleaned:
            raise ValidationError("No settings to update")

        merged = replace(student.config, **cleaned)
        if minutes_of_day(require_time(merged.lunch_end, "lunch_end")) <= minutes_of_day(
            require_time(merged.lunch_start, "lunch_start")
        ):
            raise ValidationError("lunch_end must be after lunch_start")

        self._students.update_config(student.student_id, cleaned)
        logger.info("Updated settings student=%s keys=%s", student.student_id, sorted(cleaned))
        return merged

    @staticmethod
    def preview(config: StudentConfig) -> dict:
        """Numbers shown next to the settings form."""
        hpd = config.hours_per_day
        if hpd <= 0 or config.required_hours <= 0:
            raise InvalidConfiguration("required_hours and hours_per_day must be greater than 0")
        weeks = (config.required_hours / config.hours_per_week).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return {
            "hours_per_week": config.hours_per_week,
            "working_days": math.ceil(config.required_hours / hpd),
            "weeks": weeks,
        }
