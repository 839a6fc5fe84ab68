from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @api_view("Failed to load employees.")
    def list_employees():
        employees = container.employee_service.list_employees()
        return jsonify({"employees": [e.to_dict() for e in employees]})

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @api_view("Failed to create employee.")
    def create_employee():
        container.employee_service.create_from_payload(json_body())
        return jsonify({"message": "Employee created."}), 201

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @api_view("Failed to delete employee.")
    def delete_employee(employee_id: str):
        container.employee_service.delete_employee(employee_id)
        return jsonify({"message": "Employee deleted."})
