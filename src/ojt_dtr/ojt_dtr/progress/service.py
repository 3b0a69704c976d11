from __future__ import annotations

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..core.constants import RECENT_DAYS
from ..core.exceptions import InvalidConfiguration, NotFoundError
from ..students.model import Student
from ..students.repository import StudentRepository
from ..timelogs.repository import DayRecordRepository
from .engine import classify_day, day_delta, days_needed, progress, project_completion_date, total_hours, weekly_breakdown
from .model import Projection, RecentDay, StudentOverview, TrackerSummary

logger = logging.getLogger(__name__)

ONE_PLACE = Decimal("0.1")


class ProgressReportService:
    def __init__(self, records: DayRecordRepository, students: StudentRepository):
        self._records = records
        self._students = students

    def build_tracker(self, student_id: int, *, today: date) -> TrackerSummary:
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise NotFoundError("Student not found")

        cfg = student.config
        records = list(self._records.fetch_records(student.student_id))
        total = total_hours(records)
        prog = progress(total, cfg.required_hours)
        days_left = days_needed(prog.remaining_hours, cfg.hours_per_day)
        weeks = weekly_breakdown(records, days_per_week=cfg.days_per_week, hours_per_day=cfg.hours_per_day)

        weeks_left = Decimal("0")
        if prog.remaining_hours > 0:
            weeks_left = (prog.remaining_hours / cfg.hours_per_week).quantize(ONE_PLACE, rounding=ROUND_HALF_UP)

        average = Decimal("0")
        if weeks:
            average = (total / len(weeks)).quantize(ONE_PLACE, rounding=ROUND_HALF_UP)

        recent = sorted(records, key=lambda r: r.log_date)[-RECENT_DAYS:]

        return TrackerSummary(
            student_id=student.student_id,
            total_hours=total,
            required_hours=cfg.required_hours,
            percent_complete=prog.percent_complete,
            remaining_hours=prog.remaining_hours,
            days_left=days_left,
            weeks_left=weeks_left,
            projected_completion=project_completion_date(today, prog.remaining_hours, cfg.hours_per_day),
            full_day_count=sum(w.full_day_count for w in weeks),
            half_day_count=sum(w.half_day_count for w in weeks),
            absent_count=sum(w.absent_count for w in weeks),
            average_hours_per_week=average,
            weeks=weeks,
            recent=[
                RecentDay(record=r, day_type=classify_day(r, cfg.hours_per_day), delta=day_delta(r, cfg.hours_per_day))
                for r in recent
            ],
        )

    def _overview_row(self, student: Student, today: date) -> StudentOverview:
        cfg = student.config
        total = total_hours(self._records.fetch_records(student.student_id))
        prog = progress(total, cfg.required_hours)
        projected: Optional[Projection]
        try:
            projected = project_completion_date(today, prog.remaining_hours, cfg.hours_per_day)
        except InvalidConfiguration as e:
            logger.warning("No projection for student=%s: %s", student.student_id, e)
            projected = None
        return StudentOverview(
            student_id=student.student_id,
            student_code=student.student_code,
            full_name=student.full_name,
            company=student.company,
            total_hours=total,
            remaining_hours=prog.remaining_hours,
            percent_complete=prog.percent_complete,
            projected_completion=projected,
        )

    def build_overview(self, *, today: date) -> list[StudentOverview]:
        """Handler view: every student's standing, least progress first."""
        rows = [self._overview_row(s, today) for s in self._students.list_all()]
        rows.sort(key=lambda x: (x.percent_complete, x.full_name))
        return rows
