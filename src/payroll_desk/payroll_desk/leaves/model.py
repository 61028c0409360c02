from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveType, RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    id: str
    employee_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: Optional[str]
    status: RequestStatus = RequestStatus.PENDING
    created_at: Optional[datetime] = None

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1


@dataclass(frozen=True)
class LeaveLogRow:
    """Read-model: leave request with the requesting employee."""

    id: str
    employee_id: str
    full_name: str
    department: Optional[str]
    position: Optional[str]
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: Optional[str]
    status: RequestStatus
    created_at: Optional[datetime]
