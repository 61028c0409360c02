from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import AccessGuards, json_body, ok
from ..container import Container


def register(app: Flask, container: Container, guards: AccessGuards) -> None:
    service = container.payroll_service

    @app.route("/api/payroll/calculate/<month>/<year>", methods=["GET"], endpoint="calculate_payroll")
    @guards.owner_required
    def calculate_payroll(month: str, year: str):
        return jsonify(service.calculate(month, year))

    @app.route("/api/payroll/<month>/<year>", methods=["GET"], endpoint="list_payroll")
    @guards.owner_required
    def list_payroll(month: str, year: str):
        return jsonify(service.list_for_period(month, year))

    @app.route("/api/payroll/<payroll_id>/status", methods=["PUT"], endpoint="set_payroll_status")
    @guards.owner_required
    def set_payroll_status(payroll_id: str):
        record = service.set_status(payroll_id, json_body().get("status"))
        return ok(f"Payroll marked {record.status.value}", record)
