from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import AccessGuards, created, json_body, ok
from ..container import Container


def register(app: Flask, container: Container, guards: AccessGuards) -> None:
    service = container.member_service

    @app.route("/api/members", methods=["GET"], endpoint="list_members")
    @guards.owner_required
    def list_members():
        return jsonify(service.list_all())

    @app.route("/api/members", methods=["POST"], endpoint="create_member")
    def create_member():
        body = json_body()
        return created("Member added successfully", service.create(body.get("name"), body.get("number")))

    @app.route("/api/members/<member_id>/approve", methods=["POST"], endpoint="approve_member")
    @guards.owner_required
    def approve_member(member_id: str):
        return created("Member approved", service.approve(member_id, json_body()))

    @app.route("/api/members/<member_id>/reject", methods=["POST"], endpoint="reject_member")
    @guards.owner_required
    def reject_member(member_id: str):
        service.reject(member_id)
        return ok("Member rejected")

    @app.route("/api/members/<member_id>", methods=["DELETE"], endpoint="delete_member")
    @guards.owner_required
    def delete_member(member_id: str):
        service.delete(member_id)
        return ok("Member deleted successfully")
