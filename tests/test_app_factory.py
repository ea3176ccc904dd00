from __future__ import annotations

import src.staffing_planner.staffing_planner as package
from src.staffing_planner.staffing_planner.main import create_app


def test_create_app_registers_feature_routes(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    app = create_app()

    rules = {rule.rule for rule in app.url_map.iter_rules()}
    assert {"/login", "/api/zones", "/api/distribution/calculate", "/api/distribution/summary.csv"} <= rules
    assert app.config["TESTING"] is True


def test_package_init_has_no_factory():
    assert not hasattr(package, "create_app")
