from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import AccessGuards, acting_employee_id, created, json_body, ok
from ..container import Container


def register(app: Flask, container: Container, guards: AccessGuards) -> None:
    service = container.break_service

    @app.route("/api/attendance/break/start", methods=["POST"], endpoint="start_break")
    @guards.login_required
    def start_break():
        body = json_body()
        record = service.start(acting_employee_id(body.get("employee_id")), break_type=body.get("type"))
        return created("Break started", record)

    @app.route("/api/attendance/break/end", methods=["PUT"], endpoint="end_break")
    @guards.login_required
    def end_break():
        record = service.end(acting_employee_id(json_body().get("employee_id")))
        return ok("Break ended", record, duration_minutes=record.duration_minutes)

    @app.route("/api/breaks", methods=["GET"], endpoint="break_log")
    @guards.owner_required
    def break_log():
        return jsonify(service.list_log())

    @app.route("/api/my-breaks/<employee_id>", methods=["GET"], endpoint="my_breaks")
    @guards.login_required
    def my_breaks(employee_id: str):
        return jsonify(service.list_for_employee(acting_employee_id(employee_id)))
