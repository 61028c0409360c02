from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from functools import wraps
from typing import Any, Dict, Optional

from flask import Flask, g, jsonify, request
from flask.json.provider import DefaultJSONProvider
from werkzeug.exceptions import HTTPException

from ..auth.model import TokenClaims
from ..auth.tokens import TokenService
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

STATUS_BY_ERROR = (
    (ValidationError, 400),
    (ConflictError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
)


def _api_default(o: Any) -> Any:
    if hasattr(o, "to_dict"):
        return o.to_dict()
    if isinstance(o, (datetime, date, time)):
        return o.isoformat()
    if isinstance(o, Decimal):
        return str(o)
    return DefaultJSONProvider.default(o)


class ApiJSONProvider(DefaultJSONProvider):
    """ISO dates and exact decimal strings instead of Flask's HTTP-date/float defaults."""

    default = staticmethod(_api_default)
    sort_keys = False


def status_for(error: DomainError) -> int:
    for cls, code in STATUS_BY_ERROR:
        if isinstance(error, cls):
            return code
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"error": str(e)}), status_for(e)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description or e.name}), e.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.exception("unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": str(e) or e.__class__.__name__}), 500


def register_request_logging(app: Flask) -> None:
    @app.before_request
    def log_request():
        app.logger.info("[%s] %s", request.method, request.full_path.rstrip("?"))


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def created(message: str, data: Any = None, **extra: Any):
    payload = {"message": message, "data": data}
    payload.update(extra)
    return jsonify(payload), 201


def ok(message: str, data: Any = None, **extra: Any):
    payload: Dict[str, Any] = {"message": message}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload)


class AccessGuards:
    """Bearer-token decorators shared by all controllers."""

    def __init__(self, tokens: TokenService):
        self._tokens = tokens

    def _claims_from_header(self) -> TokenClaims:
        header = request.headers.get("Authorization", "").strip()
        if not header:
            raise AuthorizationError("No token provided")
        token = header[7:].strip() if header.lower().startswith("bearer ") else header
        if not token or token.lower() in ("null", "undefined"):
            raise AuthorizationError("No token provided")
        return self._tokens.decode(token)

    def login_required(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.claims = self._claims_from_header()
            return view(*args, **kwargs)

        return wrapper

    def owner_required(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            claims = self._claims_from_header()
            if not claims.is_owner:
                raise AuthorizationError("Owner access required")
            g.claims = claims
            return view(*args, **kwargs)

        return wrapper


def acting_employee_id(requested: Optional[str]) -> str:
    """Employee a self-service request acts on.

    Employee tokens may only act for themselves; owner tokens must name the
    employee explicitly.
    """

    claims: TokenClaims = g.claims
    requested = (str(requested).strip() if requested is not None else "") or None
    if claims.is_owner:
        if not requested:
            raise ValidationError("employee_id is required")
        return requested
    if requested and requested != claims.subject:
        raise AuthorizationError("Employees can only act on their own records")
    return claims.subject
