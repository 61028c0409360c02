from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import AccessGuards, acting_employee_id, created, json_body, ok
from ..common.validators import optional_str, parse_optional_date
from ..container import Container


def register(app: Flask, container: Container, guards: AccessGuards) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/clock-in", methods=["POST"], endpoint="clock_in")
    @guards.login_required
    def clock_in():
        employee_id = acting_employee_id(json_body().get("employee_id"))
        return created("Clocked In Successfully", service.clock_in(employee_id))

    @app.route("/api/attendance/clock-out", methods=["PUT"], endpoint="clock_out")
    @guards.login_required
    def clock_out():
        employee_id = acting_employee_id(json_body().get("employee_id"))
        record = service.clock_out(employee_id)
        return ok("Clocked Out Successfully", record, total_hours=record.total_hours)

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_log")
    @guards.owner_required
    def attendance_log():
        rows = service.list_log(
            attendance_date=parse_optional_date(request.args.get("date"), "date"),
            employee_id=optional_str(request.args.get("employee_id")),
        )
        return jsonify(rows)

    @app.route("/api/my-attendance/<employee_id>", methods=["GET"], endpoint="my_attendance")
    @guards.login_required
    def my_attendance(employee_id: str):
        return jsonify(service.list_for_employee(acting_employee_id(employee_id)))
