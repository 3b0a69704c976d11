from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import DayRecord, day_status_from_fields
from .repository import DayRecordRepository

SELECT_LOG = """
    SELECT log_id, student_id, log_date, time_in, time_out, lunch_start, lunch_end,
           half_day, half_day_session, absent, hours_rendered, remarks
    FROM time_logs
"""


def _to_record(r: dict) -> DayRecord:
    fields = {
        "time_in": normalize_mysql_time(r.get("time_in")),
        "time_out": normalize_mysql_time(r.get("time_out")),
        "lunch_start": normalize_mysql_time(r.get("lunch_start")),
        "lunch_end": normalize_mysql_time(r.get("lunch_end")),
        "half_day": bool(r.get("half_day")),
        "half_day_session": r.get("half_day_session"),
        "absent": bool(r.get("absent")),
    }
    return DayRecord(
        log_date=r["log_date"],
        status=day_status_from_fields(fields),
        hours_rendered=as_decimal(r.get("hours_rendered")),
        remarks=r.get("remarks"),
        record_id=int(r["log_id"]),
        student_id=int(r["student_id"]),
    )


class MySQLDayRecordRepository(DayRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_records(self, student_id: int) -> Sequence[DayRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(SELECT_LOG + " WHERE student_id=%s ORDER BY log_date ASC", (int(student_id),))
            return [_to_record(r) for r in fetchall(cur)]

    def upsert_record(self, student_id: int, log_date: date, fields: Mapping[str, Any]) -> DayRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_logs(
                    student_id, log_date, time_in, time_out, lunch_start, lunch_end,
                    half_day, half_day_session, absent, hours_rendered, remarks
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    time_in=VALUES(time_in),
                    time_out=VALUES(time_out),
                    lunch_start=VALUES(lunch_start),
                    lunch_end=VALUES(lunch_end),
                    half_day=VALUES(half_day),
                    half_day_session=VALUES(half_day_session),
                    absent=VALUES(absent),
                    hours_rendered=VALUES(hours_rendered),
                    remarks=VALUES(remarks)
                """,
                (
                    int(student_id),
                    log_date,
                    fields.get("time_in"),
                    fields.get("time_out"),
                    fields.get("lunch_start"),
                    fields.get("lunch_end"),
                    int(bool(fields.get("half_day"))),
                    fields.get("half_day_session"),
                    int(bool(fields.get("absent"))),
                    fields.get("hours_rendered") or 0,
                    fields.get("remarks"),
                ),
            )
            cur.execute(SELECT_LOG + " WHERE student_id=%s AND log_date=%s", (int(student_id), log_date))
            return _to_record(fetchone(cur))
