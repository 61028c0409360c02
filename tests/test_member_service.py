from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.payroll_desk.payroll_desk.core.enums import EmploymentType
from src.payroll_desk.payroll_desk.core.exceptions import NotFoundError, ValidationError
from src.payroll_desk.payroll_desk.members.service import MemberService


@pytest.fixture
def svc(repos):
    return MemberService(repos.members, repos.employees)


def test_signup_requires_name_and_number(svc):
    with pytest.raises(ValidationError, match="Name and Number are required"):
        svc.create("Ravi", "")


def test_approve_converts_member_to_employee(svc, repos):
    member = svc.create("Ravi Kumar", "9000000001")

    employee = svc.approve(member.id, today=date(2025, 3, 10))

    assert employee.full_name == "Ravi Kumar"
    assert employee.phone == "9000000001"
    assert employee.joining_date == date(2025, 3, 10)
    assert employee.employment_type == EmploymentType.DAILY
    assert employee.work_rate == Decimal("0.00")
    assert repos.employees.get_by_id(employee.id) is not None
    assert repos.members.get_by_id(member.id) is None


def test_approve_applies_owner_overrides(svc):
    member = svc.create("Ravi Kumar", "9000000001")

    employee = svc.approve(
        member.id,
        {"employment_type": "hourly", "work_rate": "250", "position": "Cook", "phone": "ignored"},
        today=date(2025, 3, 10),
    )

    assert employee.employment_type == EmploymentType.HOURLY
    assert employee.work_rate == Decimal("250.00")
    assert employee.position == "Cook"
    assert employee.phone == "9000000001"


def test_approve_with_taken_phone_keeps_member(svc, repos, employee):
    member = svc.create("Someone Else", employee.phone)

    with pytest.raises(ValidationError):
        svc.approve(member.id)

    assert repos.members.get_by_id(member.id) is not None


def test_approve_unknown_member(svc):
    with pytest.raises(NotFoundError):
        svc.approve("missing")


def test_reject_removes_member(svc, repos):
    member = svc.create("Ravi", "9000000002")

    svc.reject(member.id)

    assert repos.members.list_all() == []
    with pytest.raises(NotFoundError):
        svc.delete(member.id)
