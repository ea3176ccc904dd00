from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/parameters", methods=["GET"], endpoint="parameters_get")
    @login_required
    @json_errors
    def parameters_get():
        return jsonify(container.parameter_service.get().to_dict())

    @app.route("/api/parameters", methods=["PUT"], endpoint="parameters_put")
    @login_required
    @json_errors
    def parameters_put():
        data = request.get_json(silent=True) or {}
        saved = container.parameter_service.save(
            attendance_duration=data.get("attendance_duration"),
            standard_break_time=data.get("standard_break_time"),
            average_response_rate=data.get("average_response_rate"),
        )
        return jsonify({"success": True, "parameters": saved.to_dict()})
