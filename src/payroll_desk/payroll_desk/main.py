from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Optional

import mysql.connector
from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from flask_mail import Mail

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .breaks.controller import register as register_breaks
from .common.http import (
    AccessGuards,
    ApiJSONProvider,
    register_error_handlers,
    register_request_logging,
)
from .container import Container, build_container
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_owner, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees
from .holidays.controller import register as register_holidays
from .leaves.controller import register as register_leaves
from .members.controller import register as register_members
from .payroll.controller import register as register_payroll

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _configure_logging(app: Flask, level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.logger.setLevel(level)


def _configure_mail(app: Flask, settings: Any) -> Mail:
    for key in (
        "MAIL_SERVER",
        "MAIL_PORT",
        "MAIL_USE_TLS",
        "MAIL_USE_SSL",
        "MAIL_USERNAME",
        "MAIL_PASSWORD",
        "MAIL_DEFAULT_SENDER",
    ):
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)
    return Mail(app)


def _bootstrap_database(app: Flask, settings: Any, db_config: dict) -> None:
    """Apply schema/seed when enabled. A database outage is logged, not fatal."""

    try:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            ensure_demo_owner(
                db_config,
                email=str(getattr(settings, "SEED_OWNER_EMAIL")),
                password=str(getattr(settings, "SEED_OWNER_PASSWORD")),
            )
            app.logger.info("demo seed ready")
    except mysql.connector.Error as e:
        app.logger.error("database bootstrap failed, serving without it: %s", e)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)
    app.json = ApiJSONProvider(app)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    _configure_logging(app, str(getattr(settings, "LOG_LEVEL", "INFO")))

    origins = getattr(settings, "CORS_ORIGINS", "*")
    CORS(app, resources={r"/api/*": {"origins": origins}, r"/dashboard/*": {"origins": origins}})
    mail = _configure_mail(app, settings)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        if app.config["DEBUG"]:
            print("[payroll-desk] settings=", settings_module, " db=", DBConfig.from_dict(db_config).describe())
        _bootstrap_database(app, settings, db_config)
        container = build_container(db_config=db_config, settings=settings, mail=mail)

    app.extensions["payroll_desk"] = container
    guards = AccessGuards(container.tokens)

    register_error_handlers(app)
    register_request_logging(app)

    register_auth(app, container, guards)
    register_employees(app, container, guards)
    register_attendance(app, container, guards)
    register_breaks(app, container, guards)
    register_leaves(app, container, guards)
    register_holidays(app, container, guards)
    register_members(app, container, guards)
    register_payroll(app, container, guards)
    register_dashboard(app, container, guards)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        if container.conn is None:
            database = "n/a"
        else:
            database = "up" if container.conn.ping() else "down"
        return jsonify({"status": "ok", "database": database})

    return app
