from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import AccessGuards, json_body
from ..container import Container


def _identifier(body: dict) -> str:
    return str(body.get("identifier") or body.get("email") or body.get("phone") or "")


def register(app: Flask, container: Container, guards: AccessGuards) -> None:
    service = container.auth_service

    @app.route("/api/auth/register", methods=["POST"], endpoint="register_owner")
    def register_owner():
        body = json_body()
        admin_id = service.register(body.get("email", ""), body.get("password", ""))
        return jsonify({"message": "Owner account created", "adminId": admin_id}), 201

    @app.route("/api/auth/login", methods=["POST"], endpoint="login_owner")
    def login_owner():
        body = json_body()
        token = service.login(body.get("email", ""), body.get("password", ""))
        return jsonify({"message": "Login successful", "token": token})

    @app.route("/api/auth/send-otp", methods=["POST"], endpoint="send_otp")
    def send_otp():
        service.send_otp(_identifier(json_body()))
        return jsonify({"message": "OTP sent successfully!"})

    @app.route("/api/auth/verify-otp", methods=["POST"], endpoint="verify_otp")
    def verify_otp():
        body = json_body()
        session = service.verify_otp(_identifier(body), body.get("otp") or body.get("code") or "")
        return jsonify({"message": "Login successful", "token": session.token, "user": session.employee})
