from __future__ import annotations

from datetime import datetime

import pytest

from src.payroll_desk.payroll_desk.core.enums import Role
from src.payroll_desk.payroll_desk.main import create_app

from .fakes import RecordingOtpSender, make_container, make_employee, make_repositories


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 10, 9, 0, 0)


@pytest.fixture
def employee():
    return make_employee()


@pytest.fixture
def repos(employee):
    return make_repositories(employee)


@pytest.fixture
def otp_sender():
    return RecordingOtpSender()


@pytest.fixture
def container(repos, otp_sender):
    return make_container(repos, otp_sender=otp_sender, bypass_code="123456")


@pytest.fixture
def app(container):
    app = create_app(container, settings_module="config.testing")
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def owner_headers(container):
    token = container.tokens.issue("owner-1", Role.OWNER)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def employee_headers(container, employee):
    token = container.tokens.issue(employee.id, Role.EMPLOYEE)
    return {"Authorization": f"Bearer {token}"}
