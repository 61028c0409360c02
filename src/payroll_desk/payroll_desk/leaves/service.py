from __future__ import annotations

import logging
import uuid
from typing import Any, Optional, Sequence

from ..common.validators import optional_str, parse_date, parse_enum, require_non_empty
from ..core.enums import EmployeeStatus, LeaveType, RequestStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import LeaveLogRow, LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leaves: LeaveRepository, employees: EmployeeRepository):
        self._leaves = leaves
        self._employees = employees

    def submit(
        self,
        *,
        employee_id: str,
        leave_type: Any,
        start_date: Any,
        end_date: Any,
        reason: Optional[str] = None,
    ) -> LeaveRequest:
        kind = parse_enum(LeaveType, require_non_empty(leave_type, "Leave type"), "Leave type")
        start = parse_date(start_date, "Start date")
        end = parse_date(end_date, "End date")
        if end < start:
            raise ValidationError("End date cannot be before start date")

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        leave = LeaveRequest(
            id=str(uuid.uuid4()),
            employee_id=employee_id,
            leave_type=kind,
            start_date=start,
            end_date=end,
            reason=optional_str(reason),
        )
        self._leaves.create(leave)
        logger.info("leave submitted id=%s employee=%s days=%d", leave.id, employee_id, leave.days)
        return leave

    def resolve(self, leave_id: str, status: Any) -> LeaveRequest:
        """Approve or reject. Approval marks the employee on-leave; re-approving re-applies it."""

        new_status = parse_enum(RequestStatus, require_non_empty(status, "Status"), "Status")
        if new_status == RequestStatus.PENDING:
            raise ValidationError("Status must be approved or rejected")

        employee_status = EmployeeStatus.ON_LEAVE if new_status == RequestStatus.APPROVED else None
        if not self._leaves.set_status(leave_id=leave_id, status=new_status, employee_status=employee_status):
            raise NotFoundError("Leave request not found")

        logger.info("leave %s id=%s", new_status.value, leave_id)
        leave = self._leaves.get_by_id(leave_id)
        if not leave:
            raise NotFoundError("Leave request not found")
        return leave

    def list_log(self) -> Sequence[LeaveLogRow]:
        return self._leaves.list_log()

    def list_for_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        return self._leaves.list_for_employee(employee_id)
