from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import jwt
import pytest

from src.payroll_desk.payroll_desk.auth.delivery import LogOtpSender
from src.payroll_desk.payroll_desk.auth.otp_store import InMemoryOtpStore, generate_code
from src.payroll_desk.payroll_desk.auth.service import AuthService
from src.payroll_desk.payroll_desk.container import otp_sender_from_settings
from src.payroll_desk.payroll_desk.core.enums import Role
from src.payroll_desk.payroll_desk.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.payroll_desk.payroll_desk.employees.service import EmployeeService

from .fakes import TEST_JWT_SECRET, RecordingOtpSender, make_container, make_tokens


def test_register_then_login_issues_owner_token(container):
    auth = container.auth_service
    admin_id = auth.register("Owner@Example.com", "secret1")

    token = auth.login("owner@example.com", "secret1")

    claims = container.tokens.decode(token)
    assert claims.subject == admin_id
    assert claims.role == Role.OWNER


def test_wrong_password_raises(container):
    container.auth_service.register("owner@example.com", "secret1")

    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        container.auth_service.login("owner@example.com", "wrong")


def test_unknown_owner_raises(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.login("nobody@example.com", "secret1")


def test_short_password_rejected(container):
    with pytest.raises(ValidationError):
        container.auth_service.register("owner@example.com", "123")


def test_duplicate_owner_email(container):
    container.auth_service.register("owner@example.com", "secret1")
    with pytest.raises(ValidationError):
        container.auth_service.register("owner@example.com", "secret2")


def test_registration_can_be_disabled(repos):
    auth = AuthService(
        repos.admins,
        EmployeeService(repos.employees),
        make_tokens(),
        InMemoryOtpStore(ttl=timedelta(minutes=5)),
        RecordingOtpSender(),
        allow_registration=False,
    )
    with pytest.raises(AuthorizationError):
        auth.register("owner@example.com", "secret1")


def test_otp_round_trip_by_email(container, otp_sender, employee, fixed_now):
    auth = container.auth_service
    auth.send_otp("ASHA@example.com", now=fixed_now)
    employee_id, code = otp_sender.sent[-1]
    assert employee_id == employee.id

    session = auth.verify_otp(employee.email, code, now=fixed_now + timedelta(minutes=1))

    assert session.employee.id == employee.id
    assert container.tokens.decode(session.token).role == Role.EMPLOYEE


def test_otp_by_phone_is_single_use(container, otp_sender, employee, fixed_now):
    auth = container.auth_service
    auth.send_otp(employee.phone, now=fixed_now)
    _, code = otp_sender.sent[-1]

    auth.verify_otp(employee.phone, code, now=fixed_now)
    with pytest.raises(AuthenticationError):
        auth.verify_otp(employee.phone, code, now=fixed_now)


def test_expired_otp_rejected(container, otp_sender, employee, fixed_now):
    auth = container.auth_service
    auth.send_otp(employee.email, now=fixed_now)
    _, code = otp_sender.sent[-1]

    with pytest.raises(AuthenticationError):
        auth.verify_otp(employee.email, code, now=fixed_now + timedelta(minutes=6))


def test_newer_otp_replaces_older(container, otp_sender, employee, fixed_now):
    auth = container.auth_service
    auth.send_otp(employee.email, now=fixed_now)
    _, first = otp_sender.sent[-1]
    auth.send_otp(employee.email, now=fixed_now)
    _, second = otp_sender.sent[-1]

    if first != second:
        with pytest.raises(AuthenticationError):
            auth.verify_otp(employee.email, first, now=fixed_now)
    assert auth.verify_otp(employee.email, second, now=fixed_now).employee.id == employee.id


def test_unknown_identifier(container, fixed_now):
    with pytest.raises(NotFoundError):
        container.auth_service.send_otp("ghost@example.com", now=fixed_now)
    with pytest.raises(ValidationError):
        container.auth_service.send_otp("  ", now=fixed_now)


def test_bypass_code_only_when_configured(repos, employee, fixed_now):
    with_bypass = make_container(repos, bypass_code="123456").auth_service
    without_bypass = make_container(repos).auth_service

    assert with_bypass.verify_otp(employee.email, "123456", now=fixed_now).employee.id == employee.id
    with pytest.raises(AuthenticationError):
        without_bypass.verify_otp(employee.email, "123456", now=fixed_now)


def test_failed_delivery_discards_code(repos, employee, fixed_now):
    class BrokenSender:
        code = None

        def send(self, *, employee, code):
            BrokenSender.code = code
            raise RuntimeError("smtp down")

    store = InMemoryOtpStore(ttl=timedelta(minutes=5))
    auth = AuthService(repos.admins, EmployeeService(repos.employees), make_tokens(), store, BrokenSender())

    with pytest.raises(RuntimeError):
        auth.send_otp(employee.email, now=fixed_now)
    assert BrokenSender.code is not None
    assert not store.consume(employee.id, BrokenSender.code, now=fixed_now)


def test_otp_store_wrong_code_keeps_entry(fixed_now):
    store = InMemoryOtpStore(ttl=timedelta(minutes=5))
    store.issue("e-1", "111111", now=fixed_now)

    assert not store.consume("e-1", "222222", now=fixed_now)
    assert store.consume("e-1", "111111", now=fixed_now)


def test_generate_code_is_six_digits():
    code = generate_code()
    assert len(code) == 6 and code.isdigit()


def test_token_expiry():
    tokens = make_tokens()
    issued = datetime.now(timezone.utc) - timedelta(hours=13)
    token = tokens.issue("owner-1", Role.OWNER, now=issued)

    with pytest.raises(AuthenticationError, match="Token expired"):
        tokens.decode(token)


def test_employee_token_lasts_thirty_days():
    tokens = make_tokens()
    now = datetime.now(timezone.utc)
    claims = tokens.decode(tokens.issue("e-1", Role.EMPLOYEE, now=now))

    assert claims.expires_at - now > timedelta(days=29)


def test_foreign_or_garbled_token_is_invalid():
    forged = jwt.encode(
        {"sub": "owner-1", "role": "owner", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "another-secret",
        algorithm="HS256",
    )
    with pytest.raises(AuthenticationError, match="Invalid Token"):
        make_tokens().decode(forged)
    with pytest.raises(AuthenticationError, match="Invalid Token"):
        make_tokens().decode("not-a-jwt")


def test_unknown_role_is_invalid():
    token = jwt.encode(
        {"sub": "x", "role": "superuser", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        TEST_JWT_SECRET,
        algorithm="HS256",
    )
    with pytest.raises(AuthenticationError):
        make_tokens().decode(token)


def test_non_string_password_is_rejected(container):
    with pytest.raises(ValidationError):
        container.auth_service.register("owner@example.com", 12345678)

    container.auth_service.register("owner@example.com", "12345678")
    with pytest.raises(ValidationError):
        container.auth_service.login("owner@example.com", 12345678)


def test_mail_delivery_without_mail_handle_logs_codes():
    settings = SimpleNamespace(OTP_DELIVERY="mail")

    assert isinstance(otp_sender_from_settings(settings, None), LogOtpSender)


def test_unknown_otp_delivery_is_rejected():
    with pytest.raises(ValueError):
        otp_sender_from_settings(SimpleNamespace(OTP_DELIVERY="pigeon"), None)
