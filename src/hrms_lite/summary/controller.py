from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/summary", methods=["GET"], endpoint="summary")
    @api_view("Failed to load summary.")
    def summary():
        return jsonify(container.summary_service.build().to_dict())
