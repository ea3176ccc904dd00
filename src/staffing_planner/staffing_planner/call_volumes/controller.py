from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/call-volumes", methods=["GET"], endpoint="call_volumes_get")
    @login_required
    @json_errors
    def call_volumes_get():
        zone_id = request.args.get("zone_id", type=int) or 0
        series = container.call_volume_service.hourly_series(
            zone_id=zone_id,
            day_type=request.args.get("day_type", "regular"),
        )
        return jsonify([{"hour": p.hour, "volume": p.volume} for p in series])

    @app.route("/api/call-volumes", methods=["PUT"], endpoint="call_volumes_put")
    @login_required
    @json_errors
    def call_volumes_put():
        data = request.get_json(silent=True) or {}
        stored = container.call_volume_service.replace(
            zone_id=data.get("zone_id"),
            day_type=data.get("day_type"),
            volumes=data.get("volumes") or [],
        )
        return jsonify({"success": True, "stored": stored})
