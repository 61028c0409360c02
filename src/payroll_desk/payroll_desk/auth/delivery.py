from __future__ import annotations

import logging
from typing import Protocol

from flask_mail import Mail, Message

from ..core.exceptions import ValidationError
from ..employees.model import Employee

logger = logging.getLogger(__name__)


class OtpSender(Protocol):
    def send(self, *, employee: Employee, code: str) -> None:
        raise NotImplementedError


class MailOtpSender(OtpSender):
    """Delivers login codes by email through Flask-Mail."""

    def __init__(self, mail: Mail, *, sender: str, ttl_minutes: int):
        self._mail = mail
        self._sender = sender
        self._ttl_minutes = ttl_minutes

    def send(self, *, employee: Employee, code: str) -> None:
        if not employee.email:
            raise ValidationError("This employee has no email address for OTP delivery")

        msg = Message("Your Login OTP", sender=self._sender, recipients=[employee.email])
        msg.body = f"Your OTP for login is: {code}\n\nValid for {self._ttl_minutes} minutes."
        self._mail.send(msg)
        logger.info("otp mailed employee=%s", employee.id)


class LogOtpSender(OtpSender):
    """Development delivery: writes the code to the application log."""

    def send(self, *, employee: Employee, code: str) -> None:
        logger.warning("otp for employee=%s (%s): %s", employee.id, employee.email or employee.phone, code)
