from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import EmployeeStatus, RequestStatus
from .model import LeaveLogRow, LeaveRequest


class LeaveRepository(Protocol):
    def create(self, leave: LeaveRequest) -> None:
        raise NotImplementedError

    def get_by_id(self, leave_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_log(self) -> Sequence[LeaveLogRow]:
        """Newest first."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def set_status(
        self,
        *,
        leave_id: str,
        status: RequestStatus,
        employee_status: Optional[EmployeeStatus] = None,
    ) -> bool:
        """Update the request and, when given, the employee status in one transaction."""

        raise NotImplementedError
