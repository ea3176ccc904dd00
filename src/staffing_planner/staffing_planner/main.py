"""App factory: ``flask --app src.staffing_planner.staffing_planner.main run``."""
from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_admin, list_tables

from .container import build_container
from .parameters.model import SystemParameters
from .call_volumes.controller import register as register_call_volumes
from .dashboard.controller import register as register_dashboard
from .distribution.controller import register as register_distribution
from .parameters.controller import register as register_parameters
from .users.controller import register as register_users
from .zones.controller import register as register_zones


def default_parameters_from(settings) -> SystemParameters:
    defaults = SystemParameters()
    return SystemParameters(
        attendance_duration=int(getattr(settings, "DEFAULT_ATTENDANCE_DURATION", defaults.attendance_duration)),
        standard_break_time=int(getattr(settings, "DEFAULT_STANDARD_BREAK_TIME", defaults.standard_break_time)),
        average_response_rate=int(getattr(settings, "DEFAULT_AVERAGE_RESPONSE_RATE", defaults.average_response_rate)),
    )


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Helpful startup info to avoid "connected but no tables" confusion.
    app.logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    auto_init_db = bool(getattr(settings, "AUTO_INIT_DB", False))
    auto_seed_db = bool(getattr(settings, "AUTO_SEED_DB", False))
    if auto_init_db:
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        app.logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
    if auto_seed_db:
        seed_path = Path(__file__).resolve().parents[3] / "database" / "seed.sql"
        apply_seed_sql(db_config, seed_path=seed_path)
        ensure_demo_admin(db_config)
        app.logger.info("demo seed ready")

    container = build_container(db_config=db_config, default_parameters=default_parameters_from(settings))

    register_users(app, container)
    register_dashboard(app, container)
    register_zones(app, container)
    register_call_volumes(app, container)
    register_parameters(app, container)
    register_distribution(app, container)

    return app
