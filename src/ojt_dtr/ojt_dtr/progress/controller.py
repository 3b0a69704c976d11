from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import today_local
from ..common.http import json_errors, to_json_value
from ..container import Container
from ..timelogs.serializers import record_to_dict
from .model import StudentOverview, TrackerSummary, WeekSummary


def _week_to_dict(w: WeekSummary) -> dict:
    return {
        "week_start": w.week_start.isoformat(),
        "hours": to_json_value(w.hours),
        "full_day_count": w.full_day_count,
        "half_day_count": w.half_day_count,
        "absent_count": w.absent_count,
        "target": to_json_value(w.target),
        "meets_target": w.meets_target,
        "shortfall": to_json_value(w.shortfall),
    }


def _tracker_to_dict(t: TrackerSummary) -> dict:
    return {
        "student_id": t.student_id,
        "total_hours": to_json_value(t.total_hours),
        "required_hours": to_json_value(t.required_hours),
        "percent_complete": to_json_value(t.percent_complete),
        "remaining_hours": to_json_value(t.remaining_hours),
        "days_left": t.days_left,
        "weeks_left": to_json_value(t.weeks_left),
        "projected_completion": to_json_value(t.projected_completion),
        "full_day_count": t.full_day_count,
        "half_day_count": t.half_day_count,
        "absent_count": t.absent_count,
        "average_hours_per_week": to_json_value(t.average_hours_per_week),
        "weeks": [_week_to_dict(w) for w in t.weeks],
        "recent": [
            {**record_to_dict(d.record), "day_type": d.day_type.value, "delta": to_json_value(d.delta)} for d in t.recent
        ],
    }


def _overview_to_dict(o: StudentOverview) -> dict:
    return {k: to_json_value(v) for k, v in o.__dict__.items()}


def register(app: Flask, container: Container) -> None:
    svc = container.progress_report_service

    @app.route("/api/students/<int:student_id>/progress", methods=["GET"], endpoint="student_progress")
    @json_errors
    def student_progress(student_id: int):
        tracker = svc.build_tracker(student_id, today=today_local())
        return jsonify({"success": True, "progress": _tracker_to_dict(tracker)})

    @app.route("/api/students", methods=["GET"], endpoint="students_overview")
    @json_errors
    def students_overview():
        rows = svc.build_overview(today=today_local())
        return jsonify({"success": True, "students": [_overview_to_dict(r) for r in rows]})
