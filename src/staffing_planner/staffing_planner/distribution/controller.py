from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file, session

from ..common.time_utils import today_local
from ..common.web import error_response, json_errors, login_required
from ..container import Container
from .export import (
    XLSX_MIMETYPE,
    build_workbook,
    export_filename,
    summary_csv,
    summary_filename,
    workbook_bytes,
)


def register(app: Flask, container: Container) -> None:
    def _current_plan():
        return container.plan_store.get(session["admin_id"])

    def _no_plan():
        return error_response("Please calculate distribution first", 409)

    @app.route("/api/distribution/calculate", methods=["POST"], endpoint="distribution_calculate")
    @login_required
    @json_errors
    def distribution_calculate():
        data = request.get_json(silent=True) or {}
        plan = container.planning_service.calculate(
            zone_id=data.get("zone_id"),
            day_type=data.get("day_type", "regular"),
        )
        container.plan_store.put(session["admin_id"], plan)
        return jsonify(plan.to_dict())

    @app.route("/api/distribution", methods=["GET"], endpoint="distribution_current")
    @login_required
    @json_errors
    def distribution_current():
        plan = _current_plan()
        if plan is None:
            return _no_plan()
        return jsonify(plan.to_dict())

    @app.route("/api/distribution/adjust", methods=["POST"], endpoint="distribution_adjust")
    @login_required
    @json_errors
    def distribution_adjust():
        plan = _current_plan()
        if plan is None:
            return _no_plan()

        data = request.get_json(silent=True) or {}
        plan = container.planning_service.adjust(
            plan,
            hour=data.get("hour"),
            province_id=data.get("province_id"),
            change=data.get("change", 0),
        )
        container.plan_store.put(session["admin_id"], plan)
        return jsonify(plan.to_dict())

    @app.route("/api/distribution/breaks", methods=["GET"], endpoint="distribution_breaks")
    @login_required
    @json_errors
    def distribution_breaks():
        plan = _current_plan()
        if plan is None:
            return _no_plan()
        return jsonify(container.planning_service.break_view(plan, hour=request.args.get("hour")))

    @app.route("/api/distribution/save", methods=["POST"], endpoint="distribution_save")
    @login_required
    @json_errors
    def distribution_save():
        plan = _current_plan()
        if plan is None:
            return _no_plan()
        stored = container.planning_service.save(plan)
        return jsonify({"success": True, "stored": stored})

    @app.route("/api/distribution/saved", methods=["GET"], endpoint="distribution_saved")
    @login_required
    @json_errors
    def distribution_saved():
        rows = container.planning_service.list_saved(
            zone_id=request.args.get("zone_id"),
            day_type=request.args.get("day_type", "regular"),
        )
        return jsonify(list(rows))

    @app.route("/api/distribution/export.xlsx", methods=["GET"], endpoint="distribution_export_xlsx")
    @login_required
    @json_errors
    def distribution_export_xlsx():
        plan = _current_plan()
        if plan is None:
            return _no_plan()

        today = today_local()
        buf = workbook_bytes(build_workbook(plan, today))
        return send_file(buf, mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=export_filename(plan, today))

    @app.route("/api/distribution/summary.csv", methods=["GET"], endpoint="distribution_summary_csv")
    @login_required
    @json_errors
    def distribution_summary_csv():
        plan = _current_plan()
        if plan is None:
            return _no_plan()

        buf = io.BytesIO(summary_csv(plan))
        return send_file(buf, mimetype="text/csv", as_attachment=True, download_name=summary_filename(plan))
