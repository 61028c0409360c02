from __future__ import annotations

import pytest

from src.payroll_desk.payroll_desk.core.enums import EmployeeStatus, LeaveType, RequestStatus
from src.payroll_desk.payroll_desk.core.exceptions import NotFoundError, ValidationError
from src.payroll_desk.payroll_desk.leaves.service import LeaveService


@pytest.fixture
def svc(repos):
    return LeaveService(repos.leaves, repos.employees)


def _submit(svc, employee_id, **overrides):
    fields = dict(
        employee_id=employee_id,
        leave_type="Planned",
        start_date="2025-03-12",
        end_date="2025-03-14",
        reason="family",
    )
    fields.update(overrides)
    return svc.submit(**fields)


def test_submit_creates_pending_request(svc, employee):
    leave = _submit(svc, employee.id)

    assert leave.status == RequestStatus.PENDING
    assert leave.leave_type == LeaveType.PLANNED
    assert leave.days == 3


def test_end_before_start_is_rejected(svc, employee):
    with pytest.raises(ValidationError):
        _submit(svc, employee.id, start_date="2025-03-14", end_date="2025-03-12")


def test_unknown_leave_type(svc, employee):
    with pytest.raises(ValidationError):
        _submit(svc, employee.id, leave_type="sabbatical")


def test_bad_date(svc, employee):
    with pytest.raises(ValidationError):
        _submit(svc, employee.id, start_date="14/03/2025")


def test_unknown_employee(svc):
    with pytest.raises(NotFoundError):
        _submit(svc, "missing")


def test_approval_marks_employee_on_leave(svc, repos, employee):
    leave = _submit(svc, employee.id)

    resolved = svc.resolve(leave.id, "approved")

    assert resolved.status == RequestStatus.APPROVED
    assert repos.employees.get_by_id(employee.id).status == EmployeeStatus.ON_LEAVE


def test_re_approving_reapplies_on_leave(svc, repos, employee):
    leave = _submit(svc, employee.id)
    svc.resolve(leave.id, "approved")
    repos.employees.update(employee.id, {"status": EmployeeStatus.ACTIVE})

    svc.resolve(leave.id, "approved")

    assert repos.employees.get_by_id(employee.id).status == EmployeeStatus.ON_LEAVE


def test_rejection_keeps_employee_status(svc, repos, employee):
    leave = _submit(svc, employee.id)

    svc.resolve(leave.id, "rejected")

    assert repos.employees.get_by_id(employee.id).status == EmployeeStatus.ACTIVE


def test_pending_is_not_a_resolution(svc, employee):
    leave = _submit(svc, employee.id)
    with pytest.raises(ValidationError):
        svc.resolve(leave.id, "pending")


def test_resolve_unknown_leave(svc):
    with pytest.raises(NotFoundError):
        svc.resolve("missing", "approved")
