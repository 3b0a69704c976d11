from __future__ import annotations

import csv
import io

from flask import Flask, jsonify

from ..common.datetime_utils import today_local
from ..common.http import json_body, json_errors, to_json_value
from ..container import Container
from .serializers import cumulative_row_to_dict, record_to_dict

CSV_FIELDS = [
    "log_date",
    "time_in",
    "time_out",
    "lunch_start",
    "lunch_end",
    "half_day",
    "half_day_session",
    "absent",
    "hours",
    "cumulative",
    "remaining",
    "remarks",
]


def register(app: Flask, container: Container) -> None:
    svc = container.timelog_service

    @app.route("/api/students/<int:student_id>/logs", methods=["GET"], endpoint="list_logs")
    @json_errors
    def list_logs(student_id: int):
        rows = svc.get_history(student_id)
        return jsonify({"success": True, "logs": [cumulative_row_to_dict(r) for r in rows]})

    @app.route("/api/students/<int:student_id>/logs", methods=["POST"], endpoint="save_log")
    @json_errors
    def save_log(student_id: int):
        record = svc.save_entry(student_id, json_body())
        return jsonify({"success": True, "log": record_to_dict(record)})

    @app.route("/api/students/<int:student_id>/logs/preview", methods=["POST"], endpoint="preview_log")
    @json_errors
    def preview_log(student_id: int):
        hours = svc.preview_hours(student_id, json_body())
        return jsonify({"success": True, "hours_rendered": to_json_value(hours)})

    @app.route("/api/students/<int:student_id>/logs/template", methods=["GET"], endpoint="log_template")
    @json_errors
    def log_template(student_id: int):
        return jsonify({"success": True, "log": svc.new_entry_template(student_id, today=today_local())})

    @app.route("/api/students/<int:student_id>/logs.csv", methods=["GET"], endpoint="logs_csv")
    @json_errors
    def logs_csv(student_id: int):
        rows = svc.get_history(student_id)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for r in rows:
            writer.writerow(cumulative_row_to_dict(r))

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=dtr_{student_id}.csv"},
        )
