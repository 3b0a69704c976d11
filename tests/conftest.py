from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional

import pytest

from ojt_dtr.students.model import Student, StudentConfig
from ojt_dtr.timelogs.model import DayRecord, day_status_from_fields


class InMemoryStudents:
    def __init__(self, students: list[Student]):
        self._by_id = {s.student_id: s for s in students}
        self.updates: list[tuple[int, dict]] = []

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._by_id.get(student_id)

    def list_all(self):
        return list(self._by_id.values())

    def update_config(self, student_id: int, partial_config: Mapping[str, Any]) -> None:
        self.updates.append((student_id, dict(partial_config)))
        s = self._by_id[student_id]
        self._by_id[student_id] = replace(s, config=replace(s.config, **partial_config))


class InMemoryRecords:
    """Upsert keyed by (student_id, log_date); fetch returns ascending dates."""

    def __init__(self):
        self._rows: dict[tuple[int, date], DayRecord] = {}
        self._id = 0

    def fetch_records(self, student_id: int):
        items = [r for (sid, _), r in self._rows.items() if sid == student_id]
        return sorted(items, key=lambda r: r.log_date)

    def upsert_record(self, student_id: int, log_date: date, fields: Mapping[str, Any]) -> DayRecord:
        existing = self._rows.get((student_id, log_date))
        if existing:
            record_id = existing.record_id
        else:
            self._id += 1
            record_id = self._id
        rec = DayRecord(
            log_date=log_date,
            status=day_status_from_fields(fields),
            hours_rendered=Decimal(str(fields.get("hours_rendered") or 0)),
            remarks=fields.get("remarks"),
            record_id=record_id,
            student_id=student_id,
        )
        self._rows[(student_id, log_date)] = rec
        return rec


@pytest.fixture
def config() -> StudentConfig:
    return StudentConfig()


@pytest.fixture
def student(config) -> Student:
    return Student(student_id=1, student_code="OJT-0001", full_name="Juan Dela Cruz", company="Acme", config=config)


@pytest.fixture
def students_repo(student) -> InMemoryStudents:
    return InMemoryStudents([student])


@pytest.fixture
def records_repo() -> InMemoryRecords:
    return InMemoryRecords()


@pytest.fixture
def fixed_today() -> date:
    # A Friday
    return date(2026, 2, 6)
