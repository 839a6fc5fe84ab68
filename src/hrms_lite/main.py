from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request, send_from_directory
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import json_error
from .container import Container, build_container
from .core.constants import DEFAULT_PORT, ROUTE_NOT_FOUND, UNEXPECTED_ERROR
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .summary.controller import register as register_summary

logger = logging.getLogger(__name__)

_SETTING_KEYS = ("HOST", "PORT", "DB_PATH", "STATIC_DIR", "MAX_CONTENT_LENGTH", "DEBUG", "TESTING", "LOG_LEVEL")


def _load_settings(overrides: Optional[Mapping[str, Any]]) -> dict:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {key: getattr(settings, key) for key in _SETTING_KEYS if hasattr(settings, key)}
    values["SETTINGS_MODULE"] = settings_module
    values.update(overrides or {})
    return values


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("hrms_lite").setLevel(level.upper())


def _register_cors(app: Flask) -> None:
    @app.before_request
    def preflight():
        if request.method == "OPTIONS":
            return "", 204
        return None

    @app.after_request
    def add_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, DELETE, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response


def _register_static(app: Flask, static_dir: str) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return send_from_directory(static_dir, "index.html")

    @app.route("/<path:filename>", methods=["GET"], endpoint="static_asset")
    def static_asset(filename: str):
        # /api/* never falls through to files on disk
        if filename.startswith("api/"):
            raise NotFound()
        return send_from_directory(static_dir, filename)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def route_not_found(_e):
        return json_error(ROUTE_NOT_FOUND, 404)

    @app.errorhandler(HTTPException)
    def http_error(e):
        return json_error(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def unexpected(e):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        return json_error(UNEXPECTED_ERROR, 500)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    settings = _load_settings(overrides)
    _configure_logging(str(settings.get("LOG_LEVEL", "INFO")))

    static_dir = str(Path(settings["STATIC_DIR"]).resolve())
    app = Flask(__name__, static_folder=None)
    app.config.update(settings)
    app.json.sort_keys = False

    container = build_container(db_path=settings["DB_PATH"])
    apply_schema(container.conn)
    logger.info(
        "settings=%s db=%s tables=%s",
        settings["SETTINGS_MODULE"],
        container.conn.path,
        ",".join(list_tables(container.conn)),
    )
    app.extensions["hrms_lite"] = container

    _register_cors(app)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_employees(app, container)
    register_attendance(app, container)
    register_summary(app, container)

    _register_static(app, static_dir)
    _register_error_handlers(app)

    return app


def get_container(app: Flask) -> Container:
    return app.extensions["hrms_lite"]


def run() -> None:
    app = create_app()
    host = str(app.config.get("HOST", "0.0.0.0"))
    port = int(app.config.get("PORT", DEFAULT_PORT))
    logger.info("HRMS Lite server running on http://localhost:%s", port)
    app.run(host=host, port=port, debug=bool(app.config.get("DEBUG", False)), use_reloader=False)


if __name__ == "__main__":
    run()
