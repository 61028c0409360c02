from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import AccessGuards, acting_employee_id, created, json_body, ok
from ..container import Container


def register(app: Flask, container: Container, guards: AccessGuards) -> None:
    service = container.leave_service

    @app.route("/api/leaves", methods=["POST"], endpoint="submit_leave")
    @guards.login_required
    def submit_leave():
        body = json_body()
        leave = service.submit(
            employee_id=acting_employee_id(body.get("employee_id")),
            leave_type=body.get("leave_type"),
            start_date=body.get("start_date"),
            end_date=body.get("end_date"),
            reason=body.get("reason"),
        )
        return created("Leave request submitted", leave)

    @app.route("/api/leaves", methods=["GET"], endpoint="leave_log")
    @guards.owner_required
    def leave_log():
        return jsonify(service.list_log())

    @app.route("/api/leaves/<leave_id>/status", methods=["PUT"], endpoint="resolve_leave")
    @guards.owner_required
    def resolve_leave(leave_id: str):
        leave = service.resolve(leave_id, json_body().get("status"))
        return ok(f"Leave request {leave.status.value}", leave)

    @app.route("/api/my-leaves/<employee_id>", methods=["GET"], endpoint="my_leaves")
    @guards.login_required
    def my_leaves(employee_id: str):
        return jsonify(service.list_for_employee(acting_employee_id(employee_id)))
