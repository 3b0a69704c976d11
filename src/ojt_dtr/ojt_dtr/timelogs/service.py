from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_hhmm, parse_iso_date, parse_time_of_day
from ..common.validators import require_bool
from ..core.exceptions import NotFoundError, ValidationError
from ..progress.engine import cumulative_log
from ..students.model import Student
from ..students.repository import StudentRepository
from ..timekeeping.calculator.base import HoursCalculator
from ..timekeeping.calculator.standard_calculator import StandardHoursCalculator
from .model import Absent, CumulativeRow, DayRecord, HalfDay, day_status_from_fields
from .repository import DayRecordRepository

logger = logging.getLogger(__name__)


class TimeLogService:
    """Use case: log a day, preview its hours, read the log history."""

    def __init__(
        self,
        records: DayRecordRepository,
        students: StudentRepository,
        *,
        calculator: Optional[HoursCalculator] = None,
    ):
        self._records = records
        self._students = students
        self._calculator = calculator or StandardHoursCalculator()

    def _get_student(self, student_id: int) -> Student:
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise NotFoundError("Student not found")
        return student

    @staticmethod
    def _parse_log_date(value: Any) -> date:
        if isinstance(value, date):
            return value
        v = (value or "").strip() if isinstance(value, str) else ""
        if not v:
            raise ValidationError("log_date is required")
        try:
            return parse_iso_date(v)
        except ValueError:
            raise ValidationError("log_date must be a valid date (YYYY-MM-DD)")

    @staticmethod
    def build_record(log_date: date, payload: Mapping[str, Any]) -> DayRecord:
        remarks = payload.get("remarks")
        if remarks is not None and not isinstance(remarks, str):
            raise ValidationError("remarks must be text")
        fields = dict(payload)
        for flag in ("absent", "half_day"):
            fields[flag] = require_bool(payload.get(flag) or False, flag)
        return DayRecord(log_date=log_date, status=day_status_from_fields(fields), remarks=(remarks or "").strip() or None)

    def preview_hours(self, student_id: int, payload: Mapping[str, Any]) -> Decimal:
        """Hours the entry would render if saved now. Nothing is written."""
        student = self._get_student(student_id)
        record = self.build_record(self._parse_log_date(payload.get("log_date") or date.min), payload)
        return self._calculator.compute_hours(record, student.config)

    def save_entry(self, student_id: int, payload: Mapping[str, Any]) -> DayRecord:
        student = self._get_student(student_id)
        log_date = self._parse_log_date(payload.get("log_date"))
        record = self.build_record(log_date, payload)
        hours = self._calculator.compute_hours(record, student.config)

        fields = {
            "time_in": format_hhmm(parse_time_of_day(record.time_in)),
            "time_out": format_hhmm(parse_time_of_day(record.time_out)),
            "lunch_start": format_hhmm(parse_time_of_day(record.lunch_start)),
            "lunch_end": format_hhmm(parse_time_of_day(record.lunch_end)),
            "half_day": isinstance(record.status, HalfDay),
            "half_day_session": record.half_day_session.value if record.half_day_session else None,
            "absent": isinstance(record.status, Absent),
            "hours_rendered": hours,
            "remarks": record.remarks,
        }
        saved = self._records.upsert_record(student.student_id, log_date, fields)
        logger.info("Saved DTR entry student=%s date=%s hours=%s", student.student_id, log_date, hours)
        return saved

    def get_history(self, student_id: int) -> list[CumulativeRow]:
        student = self._get_student(student_id)
        records = self._records.fetch_records(student.student_id)
        return cumulative_log(records, student.config.required_hours)

    def new_entry_template(self, student_id: int, *, today: date) -> dict:
        """Prefilled form values for a new entry.

        Targets today, or yesterday when today already has a record.
        """

        student = self._get_student(student_id)
        cfg = student.config
        logged = {r.log_date for r in self._records.fetch_records(student.student_id)}
        log_date = today - timedelta(days=1) if today in logged else today
        return {
            "log_date": log_date.isoformat(),
            "time_in": cfg.default_time_in,
            "time_out": cfg.default_time_out,
            "lunch_start": cfg.lunch_start,
            "lunch_end": cfg.lunch_end,
            "half_day": False,
            "half_day_session": "AM",
            "absent": False,
            "remarks": "",
        }
