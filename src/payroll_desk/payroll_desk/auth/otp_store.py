from __future__ import annotations

import hmac
import secrets
import string
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Optional

from ..core.constants import OTP_LENGTH


@dataclass(frozen=True)
class PendingOtp:
    code: str
    expires_at: datetime


def generate_code(length: int = OTP_LENGTH) -> str:
    return "".join(secrets.choice(string.digits) for _ in range(length))


class InMemoryOtpStore:
    """Short-lived one-time codes keyed by employee id.

    Process-local: with several worker processes an OTP must be verified by
    the process that issued it.
    """

    def __init__(self, *, ttl: timedelta):
        self._ttl = ttl
        self._pending: Dict[str, PendingOtp] = {}
        self._lock = threading.Lock()

    def issue(self, key: str, code: str, *, now: datetime) -> PendingOtp:
        entry = PendingOtp(code=code, expires_at=now + self._ttl)
        with self._lock:
            self._purge(now)
            self._pending[key] = entry
        return entry

    def consume(self, key: str, code: str, *, now: datetime) -> bool:
        """True when ``code`` matches an unexpired entry; the entry is removed."""

        with self._lock:
            entry: Optional[PendingOtp] = self._pending.get(key)
            if entry is None:
                return False
            if entry.expires_at <= now:
                del self._pending[key]
                return False
            if not hmac.compare_digest(entry.code, str(code)):
                return False
            del self._pending[key]
            return True

    def discard(self, key: str) -> None:
        with self._lock:
            self._pending.pop(key, None)

    def _purge(self, now: datetime) -> None:
        expired = [k for k, v in self._pending.items() if v.expires_at <= now]
        for k in expired:
            del self._pending[k]
