from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import AccessGuards, created, json_body, ok
from ..container import Container


def register(app: Flask, container: Container, guards: AccessGuards) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @guards.owner_required
    def list_employees():
        return jsonify(service.list_all())

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @guards.owner_required
    def get_employee(employee_id: str):
        return jsonify(service.get(employee_id))

    @app.route("/api/employees/verify/<phone>", methods=["GET"], endpoint="verify_employee_phone")
    def verify_employee_phone(phone: str):
        return jsonify(service.verify_by_phone(phone))

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @guards.owner_required
    def create_employee():
        return created("Created", service.create(json_body()))

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @guards.owner_required
    def update_employee(employee_id: str):
        return ok("Updated", service.update(employee_id, json_body()))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @guards.owner_required
    def delete_employee(employee_id: str):
        service.delete(employee_id)
        return ok("Deleted")
