from __future__ import annotations

from datetime import date

import pytest

from ojt_dtr.container import build_services
from ojt_dtr.main import create_app


@pytest.fixture
def client(monkeypatch, records_repo, students_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(students_repo=students_repo, records_repo=records_repo)
    app = create_app(container)
    return app.test_client()


def test_save_and_list_logs(client):
    resp = client.post(
        "/api/students/1/logs",
        json={"log_date": "2026-02-02", "time_in": "08:00", "time_out": "17:00", "remarks": "Setup laptops"},
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["log"]["hours_rendered"] == 8.0

    logs = client.get("/api/students/1/logs").get_json()["logs"]
    assert len(logs) == 1
    assert logs[0]["cumulative"] == 8.0
    assert logs[0]["remaining"] == 478.0


def test_preview_endpoint(client):
    resp = client.post("/api/students/1/logs/preview", json={"half_day": True})
    assert resp.get_json()["hours_rendered"] == 4.0


def test_validation_error_is_400(client):
    resp = client.post("/api/students/1/logs", json={"time_in": "08:00"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_non_object_body_is_400(client):
    resp = client.post("/api/students/1/logs", data="[]", content_type="application/json")
    assert resp.status_code == 400


def test_unknown_student_is_404(client):
    assert client.get("/api/students/9/progress").status_code == 404


def test_progress_endpoint(client):
    client.post("/api/students/1/logs", json={"log_date": "2026-02-02", "time_in": "08:00", "time_out": "17:00"})
    client.post("/api/students/1/logs", json={"log_date": "2026-02-03", "absent": True})

    progress = client.get("/api/students/1/progress").get_json()["progress"]

    assert progress["total_hours"] == 8.0
    assert progress["absent_count"] == 1
    assert progress["weeks"][0]["week_start"] == "2026-02-01"
    assert progress["weeks"][0]["meets_target"] is False
    assert progress["weeks"][0]["shortfall"] == 32.0
    assert [d["day_type"] for d in progress["recent"]] == ["FULL", "ABSENT"]
    assert [d["delta"] for d in progress["recent"]] == [0.0, 0.0]


def test_settings_roundtrip(client):
    resp = client.patch("/api/students/1/settings", json={"hours_per_day": 6, "days_per_week": 6})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["settings"]["hours_per_day"] == 6.0
    assert body["preview"]["hours_per_week"] == 36.0

    assert client.get("/api/students/1/settings").get_json()["settings"]["days_per_week"] == 6


def test_settings_rejects_bad_days_per_week(client):
    resp = client.patch("/api/students/1/settings", json={"days_per_week": 9})
    assert resp.status_code == 400


def test_students_overview(client):
    students = client.get("/api/students").get_json()["students"]
    assert students[0]["student_code"] == "OJT-0001"
    assert students[0]["percent_complete"] == 0.0


def test_template_uses_local_today(client, monkeypatch):
    monkeypatch.setattr("ojt_dtr.timelogs.controller.today_local", lambda: date(2026, 2, 6))
    log = client.get("/api/students/1/logs/template").get_json()["log"]
    assert log["log_date"] == "2026-02-06"
    assert log["time_out"] == "17:00"


def test_logs_csv_export(client):
    client.post("/api/students/1/logs", json={"log_date": "2026-02-02", "half_day": True, "half_day_session": "PM"})
    resp = client.get("/api/students/1/logs.csv")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    text = resp.data.decode("utf-8-sig")
    assert text.splitlines()[0].startswith("log_date,time_in")
    assert "2026-02-02" in text and "PM" in text


def test_recent_days_carry_overtime_and_undertime(client):
    client.post("/api/students/1/logs", json={"log_date": "2026-02-02", "time_in": "08:00", "time_out": "18:30"})
    client.post("/api/students/1/logs", json={"log_date": "2026-02-03", "time_in": "08:00", "time_out": "15:00"})

    recent = client.get("/api/students/1/progress").get_json()["progress"]["recent"]

    assert [(d["day_type"], d["delta"]) for d in recent] == [("OVERTIME", 1.5), ("UNDER", -2.0)]


def test_non_text_remarks_is_400(client):
    resp = client.post(
        "/api/students/1/logs",
        json={"log_date": "2026-02-02", "time_in": "08:00", "time_out": "17:00", "remarks": 5},
    )
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert client.get("/api/students/1/logs").get_json()["logs"] == []


def test_absent_false_string_logs_a_present_day(client):
    resp = client.post(
        "/api/students/1/logs",
        json={"log_date": "2026-02-02", "time_in": "08:00", "time_out": "17:00", "absent": "false"},
    )
    log = resp.get_json()["log"]
    assert log["absent"] is False
    assert log["hours_rendered"] == 8.0


def test_settings_too_small_for_storage_is_400(client):
    resp = client.patch("/api/students/1/settings", json={"hours_per_day": "0.001"})
    assert resp.status_code == 400
    assert client.get("/api/students/1/progress").status_code == 200
