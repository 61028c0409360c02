from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.payroll_desk.payroll_desk.core.enums import EmployeeStatus, EmploymentType, MonthCalculationType
from src.payroll_desk.payroll_desk.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.payroll_desk.payroll_desk.employees.service import EmployeeService


@pytest.fixture
def svc(repos):
    return EmployeeService(repos.employees)


def _payload(**overrides):
    body = {
        "full_name": "Meera Nair",
        "joining_date": "2025-02-01",
        "employment_type": "Weekly",
        "work_rate": "18000",
        "phone": "9111111111",
        "email": "Meera@Example.com",
    }
    body.update(overrides)
    return body


def test_create_converts_fields(svc):
    e = svc.create(_payload(month_calculation_type="fixed_26", pf_enabled="true"))

    assert e.joining_date == date(2025, 2, 1)
    assert e.employment_type == EmploymentType.WEEKLY
    assert e.work_rate == Decimal("18000.00")
    assert e.month_calculation_type == MonthCalculationType.FIXED_26
    assert e.email == "meera@example.com"
    assert e.pf_enabled is True
    assert e.status == EmployeeStatus.ACTIVE
    assert e.allowed_leaves == 12


@pytest.mark.parametrize("missing", ["full_name", "joining_date", "employment_type", "work_rate"])
def test_create_requires_core_fields(svc, missing):
    with pytest.raises(ValidationError):
        svc.create(_payload(**{missing: None}))


def test_negative_rate_rejected(svc):
    with pytest.raises(ValidationError):
        svc.create(_payload(work_rate="-5"))


def test_duplicate_phone_rejected(svc, employee):
    with pytest.raises(ValidationError, match="phone"):
        svc.create(_payload(phone=employee.phone))


def test_update_partial(svc, employee):
    updated = svc.update(employee.id, {"position": "Chef", "status": "inactive"})

    assert updated.position == "Chef"
    assert updated.status == EmployeeStatus.INACTIVE
    assert updated.full_name == employee.full_name


def test_update_to_own_email_is_fine(svc, employee):
    assert svc.update(employee.id, {"email": employee.email}).email == employee.email


def test_lookup_by_identifier(svc, employee):
    assert svc.find_by_identifier(" ASHA@EXAMPLE.COM ").id == employee.id
    assert svc.find_by_identifier(employee.phone).id == employee.id
    assert svc.find_by_identifier("0000") is None


def test_verify_by_phone(svc, employee):
    assert svc.verify_by_phone(employee.phone).id == employee.id
    with pytest.raises(NotFoundError):
        svc.verify_by_phone("0000")


def test_delete_with_history_conflicts(svc, repos, employee):
    repos.employees.referenced.add(employee.id)
    with pytest.raises(ConflictError):
        svc.delete(employee.id)


def test_delete(svc, employee):
    svc.delete(employee.id)
    with pytest.raises(NotFoundError):
        svc.get(employee.id)
    with pytest.raises(NotFoundError):
        svc.delete(employee.id)


@pytest.mark.parametrize("rate", ["1e30", "100000000", "99999999.999"])
def test_work_rate_above_column_range_is_rejected(svc, rate):
    with pytest.raises(ValidationError):
        svc.create(_payload(work_rate=rate))


def test_largest_work_rate_is_accepted(svc):
    assert svc.create(_payload(work_rate="99999999.99")).work_rate == Decimal("99999999.99")
