from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_errors, to_json_value
from ..container import Container
from .model import StudentConfig


def _config_to_dict(cfg: StudentConfig) -> dict:
    return {k: to_json_value(v) for k, v in cfg.__dict__.items()}


def register(app: Flask, container: Container) -> None:
    svc = container.settings_service

    @app.route("/api/students/<int:student_id>/settings", methods=["GET"], endpoint="get_settings")
    @json_errors
    def get_settings(student_id: int):
        cfg = svc.get_settings(student_id)
        preview = {k: to_json_value(v) for k, v in svc.preview(cfg).items()}
        return jsonify({"success": True, "settings": _config_to_dict(cfg), "preview": preview})

    @app.route("/api/students/<int:student_id>/settings", methods=["PATCH"], endpoint="update_settings")
    @json_errors
    def update_settings(student_id: int):
        cfg = svc.update_settings(student_id, json_body())
        preview = {k: to_json_value(v) for k, v in svc.preview(cfg).items()}
        return jsonify({"success": True, "settings": _config_to_dict(cfg), "preview": preview})
