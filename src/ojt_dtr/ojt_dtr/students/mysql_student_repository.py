from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import Student, StudentConfig
from .repository import StudentRepository

CONFIG_COLUMNS = (
    "required_hours",
    "hours_per_day",
    "days_per_week",
    "default_time_in",
    "default_time_out",
    "lunch_start",
    "lunch_end",
    "allow_overtime",
)

SELECT_STUDENT = f"""
    SELECT student_id, student_code, full_name, school, company, {", ".join(CONFIG_COLUMNS)}
    FROM students
"""


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        student_code=r["student_code"],
        full_name=r["full_name"],
        school=r.get("school"),
        company=r.get("company"),
        config=StudentConfig(
            required_hours=as_decimal(r["required_hours"]),
            hours_per_day=as_decimal(r["hours_per_day"]),
            days_per_week=int(r["days_per_week"]),
            default_time_in=normalize_mysql_time(r["default_time_in"]),
            default_time_out=normalize_mysql_time(r["default_time_out"]),
            lunch_start=normalize_mysql_time(r["lunch_start"]),
            lunch_end=normalize_mysql_time(r["lunch_end"]),
            allow_overtime=bool(r.get("allow_overtime")),
        ),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(SELECT_STUDENT + " WHERE student_id=%s", (int(student_id),))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(SELECT_STUDENT + " ORDER BY full_name")
            return [_to_student(r) for r in fetchall(cur)]

    def update_config(self, student_id: int, partial_config: Mapping[str, Any]) -> None:
        # Column names come from a fixed whitelist, values are parameterized.
        cols = [c for c in CONFIG_COLUMNS if c in partial_config]
        if not cols:
            return
        assignments = ", ".join(f"{c}=%s" for c in cols)
        params = [partial_config[c] for c in cols] + [int(student_id)]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE students SET {assignments} WHERE student_id=%s", tuple(params))
