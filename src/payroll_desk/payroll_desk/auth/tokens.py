from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import TokenClaims

ALGORITHM = "HS256"


class TokenService:
    """Signs and verifies bearer tokens (JWT, HS256)."""

    def __init__(self, secret: str, *, owner_ttl: timedelta, employee_ttl: timedelta):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._ttl = {Role.OWNER: owner_ttl, Role.EMPLOYEE: employee_ttl}

    def issue(self, subject: str, role: Role, *, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(subject),
            "role": role.value,
            "iat": now,
            "exp": now + self._ttl[role],
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "role", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Unauthorized: Token expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Unauthorized: Invalid Token")

        try:
            role = Role(payload["role"])
        except ValueError:
            raise AuthenticationError("Unauthorized: Invalid Token")

        return TokenClaims(
            subject=str(payload["sub"]),
            role=role,
            expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc),
        )
