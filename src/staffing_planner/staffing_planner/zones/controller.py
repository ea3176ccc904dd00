from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import json_errors, login_required
from ..container import Container
from .model import working_hours_label


def register(app: Flask, container: Container) -> None:
    @app.route("/api/zones", methods=["GET"], endpoint="zones_list")
    @login_required
    @json_errors
    def zones_list():
        zones = container.zone_service.list_with_counts()
        return jsonify(
            [
                {
                    "id": z.zone_id,
                    "name": z.name,
                    "description": z.description,
                    "provinceCount": z.province_count,
                    "operatorCount": z.operator_count,
                }
                for z in zones
            ]
        )

    @app.route("/api/zones", methods=["POST"], endpoint="zones_create")
    @login_required
    @json_errors
    def zones_create():
        data = request.get_json(silent=True) or {}
        zone_id = container.zone_service.create(name=data.get("name", ""), description=data.get("description"))
        return jsonify({"success": True, "id": zone_id}), 201

    @app.route("/api/zones/<int:zone_id>", methods=["DELETE"], endpoint="zones_delete")
    @login_required
    @json_errors
    def zones_delete(zone_id: int):
        container.zone_service.delete(zone_id)
        return jsonify({"success": True})

    @app.route("/api/provinces", methods=["GET"], endpoint="provinces_list")
    @login_required
    @json_errors
    def provinces_list():
        return jsonify(
            [
                {
                    "id": p.province_id,
                    "name": p.name,
                    "zoneId": p.zone_id,
                    "zoneName": p.zone_name,
                    "workStartTime": p.work_start_time,
                    "workEndTime": p.work_end_time,
                    "workingHours": working_hours_label(p),
                    "operators": p.operators,
                }
                for p in container.province_service.list_all()
            ]
        )

    @app.route("/api/provinces", methods=["POST"], endpoint="provinces_create")
    @login_required
    @json_errors
    def provinces_create():
        data = request.get_json(silent=True) or {}
        province_id = container.province_service.create(
            name=data.get("name", ""),
            zone_id=data.get("zone_id"),
            work_start_time=data.get("work_start_time"),
            work_end_time=data.get("work_end_time"),
            operators=data.get("operators", 0),
        )
        return jsonify({"success": True, "id": province_id}), 201

    @app.route("/api/provinces/<int:province_id>", methods=["DELETE"], endpoint="provinces_delete")
    @login_required
    @json_errors
    def provinces_delete(province_id: int):
        container.province_service.delete(province_id)
        return jsonify({"success": True})
