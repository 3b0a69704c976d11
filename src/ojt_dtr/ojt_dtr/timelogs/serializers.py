from __future__ import annotations

from ..common.datetime_utils import format_hhmm, parse_time_of_day
from ..common.http import to_json_value
from .model import CumulativeRow, DayRecord


def record_to_dict(r: DayRecord) -> dict:
    return {
        "record_id": r.record_id,
        "student_id": r.student_id,
        "log_date": r.log_date.isoformat(),
        "time_in": format_hhmm(parse_time_of_day(r.time_in)),
        "time_out": format_hhmm(parse_time_of_day(r.time_out)),
        "lunch_start": format_hhmm(parse_time_of_day(r.lunch_start)),
        "lunch_end": format_hhmm(parse_time_of_day(r.lunch_end)),
        "half_day": r.is_half_day,
        "half_day_session": to_json_value(r.half_day_session),
        "absent": r.is_absent,
        "hours_rendered": to_json_value(r.hours_rendered),
        "remarks": r.remarks,
    }


def cumulative_row_to_dict(row: CumulativeRow) -> dict:
    out = record_to_dict(row.record)
    out.update(
        {
            "hours": to_json_value(row.hours),
            "cumulative": to_json_value(row.cumulative),
            "remaining": to_json_value(row.remaining),
        }
    )
    return out
