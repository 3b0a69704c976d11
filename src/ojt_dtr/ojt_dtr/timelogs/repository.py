from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Protocol, Sequence

from .model import DayRecord


class DayRecordRepository(Protocol):
    def fetch_records(self, student_id: int) -> Sequence[DayRecord]:
        """All records of a student, ascending by date."""

        raise NotImplementedError

    def upsert_record(self, student_id: int, log_date: date, fields: Mapping[str, Any]) -> DayRecord:
        """Create or replace the record for (student_id, log_date).

        ``fields`` holds the flat columns (time_in, time_out, lunch_start,
        lunch_end, half_day, half_day_session, absent, hours_rendered,
        remarks). Last write wins. Returns the persisted row.
        """

        raise NotImplementedError
