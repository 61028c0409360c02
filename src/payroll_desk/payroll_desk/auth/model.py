from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import Role


@dataclass(frozen=True)
class Admin:
    """Owner account."""

    id: str
    email: str
    password_hash: str


@dataclass(frozen=True)
class TokenClaims:
    subject: str
    role: Role
    expires_at: datetime

    @property
    def is_owner(self) -> bool:
        return self.role == Role.OWNER
