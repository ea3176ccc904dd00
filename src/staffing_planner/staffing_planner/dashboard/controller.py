from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", endpoint="dashboard")
    @login_required
    @json_errors
    def dashboard():
        stats = container.dashboard_service.stats()
        return jsonify(
            {
                "zoneCount": stats.zone_count,
                "provinceCount": stats.province_count,
                "operatorCount": stats.operator_count,
                "parameters": stats.parameters.to_dict(),
                "zones": [
                    {
                        "id": z.zone_id,
                        "name": z.name,
                        "provinceCount": z.province_count,
                        "operatorCount": z.operator_count,
                    }
                    for z in stats.zones
                ],
            }
        )
