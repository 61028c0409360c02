from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import AccessGuards, created, json_body, ok
from ..container import Container


def register(app: Flask, container: Container, guards: AccessGuards) -> None:
    service = container.holiday_service

    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    def list_holidays():
        return jsonify(service.list_all())

    @app.route("/api/holidays", methods=["POST"], endpoint="create_holiday")
    @guards.owner_required
    def create_holiday():
        return created("Holiday added", service.create(json_body()))

    @app.route("/api/holidays/<holiday_id>", methods=["PUT"], endpoint="update_holiday")
    @guards.owner_required
    def update_holiday(holiday_id: str):
        return ok("Holiday updated", service.update(holiday_id, json_body()))

    @app.route("/api/holidays/<holiday_id>", methods=["DELETE"], endpoint="delete_holiday")
    @guards.owner_required
    def delete_holiday(holiday_id: str):
        service.delete(holiday_id)
        return ok("Holiday deleted")
