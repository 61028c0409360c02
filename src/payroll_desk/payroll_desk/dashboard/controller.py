from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import AccessGuards
from ..container import Container


def register(app: Flask, container: Container, guards: AccessGuards) -> None:
    service = container.dashboard_service

    @app.route("/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @guards.owner_required
    def dashboard_stats():
        return jsonify(service.stats().to_dict())
