from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    @api_view("Failed to record attendance.")
    def record_attendance():
        container.attendance_service.record_from_payload(json_body())
        return jsonify({"message": "Attendance recorded."}), 201

    @app.route("/api/employees/<employee_id>/attendance", methods=["GET"], endpoint="employee_attendance")
    @api_view("Failed to load attendance.")
    def employee_attendance(employee_id: str):
        records = container.attendance_service.history(
            employee_id,
            start_date=request.args.get("startDate") or None,
            end_date=request.args.get("endDate") or None,
        )
        return jsonify({"records": [r.to_dict() for r in records]})
