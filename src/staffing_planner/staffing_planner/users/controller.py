from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.web import json_errors, login_required
from ..core.constants import DEFAULT_SESSION_DAYS
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    @json_errors
    def login():
        data = request.get_json(silent=True) or request.form
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        session.permanent = bool(data.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

        session["admin_id"] = s_user.admin_id
        session["name"] = s_user.full_name
        session["role"] = s_user.role.value

        app.logger.info("admin %s signed in", s_user.admin_id)
        return jsonify({"success": True, "name": s_user.full_name})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        admin_id = session.get("admin_id")
        if admin_id is not None:
            container.plan_store.clear(admin_id)
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        return jsonify({"id": session["admin_id"], "name": session.get("name"), "role": session.get("role")})
