from __future__ import annotations

import hmac
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_local
from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.service import EmployeeService
from .delivery import OtpSender
from .model import Admin
from .otp_store import InMemoryOtpStore, generate_code
from .repository import AdminRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeSession:
    token: str
    employee: Employee


class AuthService:
    """Use cases: owner registration/login and employee OTP login."""

    def __init__(
        self,
        admins: AdminRepository,
        employees: EmployeeService,
        tokens: TokenService,
        otp_store: InMemoryOtpStore,
        otp_sender: OtpSender,
        *,
        allow_registration: bool = True,
        bypass_code: Optional[str] = None,
    ):
        self._admins = admins
        self._employees = employees
        self._tokens = tokens
        self._otp_store = otp_store
        self._otp_sender = otp_sender
        self._allow_registration = allow_registration
        self._bypass_code = bypass_code or None

    def register(self, email: str, password: str) -> str:
        if not self._allow_registration:
            raise AuthorizationError("Owner registration is disabled")

        email = require_non_empty(email, "Email").lower()
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        admin = Admin(id=str(uuid.uuid4()), email=email, password_hash=generate_password_hash(password))
        self._admins.create(admin)
        logger.info("owner account created id=%s", admin.id)
        return admin.id

    def login(self, email: str, password: str) -> str:
        if not isinstance(password, str):
            raise ValidationError("Password must be a string")
        admin = self._admins.get_by_email(str(email or "").strip().lower())

        try:
            ok = bool(admin) and check_password_hash(admin.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")
        return self._tokens.issue(admin.id, Role.OWNER)

    def send_otp(self, identifier: str, *, now: Optional[datetime] = None) -> None:
        now = now or now_local()
        employee = self._employees.find_by_identifier(identifier)
        if not employee:
            raise NotFoundError("Email or phone not found in our system")

        code = generate_code()
        self._otp_store.issue(employee.id, code, now=now)
        try:
            self._otp_sender.send(employee=employee, code=code)
        except Exception:
            self._otp_store.discard(employee.id)
            raise

    def verify_otp(self, identifier: str, code: str, *, now: Optional[datetime] = None) -> EmployeeSession:
        now = now or now_local()
        employee = self._employees.find_by_identifier(identifier)
        if not employee:
            raise NotFoundError("User not found")

        code = str(code or "").strip()
        if not code:
            raise AuthenticationError("Invalid OTP")

        if self._bypass_code and hmac.compare_digest(code, self._bypass_code):
            self._otp_store.discard(employee.id)
            logger.warning("otp bypass code used for employee=%s", employee.id)
        elif not self._otp_store.consume(employee.id, code, now=now):
            raise AuthenticationError("Invalid OTP")

        token = self._tokens.issue(employee.id, Role.EMPLOYEE)
        return EmployeeSession(token=token, employee=employee)
