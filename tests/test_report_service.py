from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from conftest import InMemoryRecords, InMemoryStudents
from ojt_dtr.core.constants import COMPLETED
from ojt_dtr.core.enums import DayType
from ojt_dtr.core.exceptions import NotFoundError
from ojt_dtr.progress.service import ProgressReportService
from ojt_dtr.students.model import Student, StudentConfig


def _log(repo: InMemoryRecords, student_id: int, d: date, hours, **flags) -> None:
    repo.upsert_record(student_id, d, {"time_in": "08:00", "time_out": "17:00", "hours_rendered": hours, **flags})


def test_tracker_summary(records_repo, students_repo, fixed_today):
    _log(records_repo, 1, date(2026, 2, 2), Decimal("8"))
    _log(records_repo, 1, date(2026, 2, 3), Decimal("9"))
    _log(records_repo, 1, date(2026, 2, 4), Decimal("4"), half_day=True)
    _log(records_repo, 1, date(2026, 2, 5), Decimal("0"), absent=True)
    _log(records_repo, 1, date(2026, 1, 30), Decimal("6"))

    t = ProgressReportService(records_repo, students_repo).build_tracker(1, today=fixed_today)

    assert t.total_hours == 27
    assert t.remaining_hours == 459
    assert t.days_left == 58
    assert t.weeks_left == Decimal("11.5")
    assert t.full_day_count == 3
    assert t.half_day_count == 1
    assert t.absent_count == 1
    assert [w.week_start for w in t.weeks] == [date(2026, 2, 1), date(2026, 1, 25)]
    assert t.average_hours_per_week == Decimal("13.5")
    assert t.recent[0].record.log_date == date(2026, 1, 30)
    assert t.recent[0].day_type == DayType.UNDER
    assert t.recent[2].day_type == DayType.OVERTIME
    assert t.recent[0].delta == Decimal("-2")
    assert t.recent[1].delta == 0
    assert t.recent[2].delta == Decimal("1")
    assert t.recent[3].delta == 0


def test_tracker_completed(records_repo, fixed_today):
    students = InMemoryStudents(
        [Student(student_id=2, student_code="B", full_name="B", config=StudentConfig(required_hours=Decimal("16")))]
    )
    _log(records_repo, 2, date(2026, 2, 2), Decimal("8.00"))
    _log(records_repo, 2, date(2026, 2, 3), Decimal("8.00"))

    t = ProgressReportService(records_repo, students).build_tracker(2, today=fixed_today)

    assert t.total_hours == 16
    assert t.percent_complete == 100
    assert t.days_left == 0
    assert t.weeks_left == 0
    assert t.projected_completion == COMPLETED


def test_tracker_without_logs(records_repo, students_repo, fixed_today):
    t = ProgressReportService(records_repo, students_repo).build_tracker(1, today=fixed_today)
    assert t.total_hours == 0
    assert t.weeks == []
    assert t.average_hours_per_week == 0
    assert t.projected_completion == date(2026, 5, 4)


def test_tracker_unknown_student(records_repo, students_repo, fixed_today):
    with pytest.raises(NotFoundError):
        ProgressReportService(records_repo, students_repo).build_tracker(7, today=fixed_today)


def test_overview_orders_least_progress_first(records_repo, fixed_today):
    students = InMemoryStudents(
        [
            Student(student_id=1, student_code="A", full_name="Ana"),
            Student(student_id=2, student_code="B", full_name="Ben"),
        ]
    )
    _log(records_repo, 2, date(2026, 2, 2), Decimal("8"))

    rows = ProgressReportService(records_repo, students).build_overview(today=fixed_today)

    assert [r.full_name for r in rows] == ["Ana", "Ben"]
    assert rows[0].total_hours == 0
    assert rows[1].remaining_hours == 478


def test_overview_survives_unprojectable_student(records_repo, fixed_today, caplog):
    slow = StudentConfig(required_hours=Decimal("99999.99"), hours_per_day=Decimal("0.01"))
    students = InMemoryStudents(
        [
            Student(student_id=1, student_code="A", full_name="Ana"),
            Student(student_id=2, student_code="B", full_name="Ben", config=slow),
        ]
    )

    rows = ProgressReportService(records_repo, students).build_overview(today=fixed_today)

    by_name = {r.full_name: r for r in rows}
    assert by_name["Ben"].projected_completion is None
    assert by_name["Ana"].projected_completion == date(2026, 5, 4)
    assert "No projection for student=2" in caplog.text
