from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ..core.enums import AttendanceStatus, EmployeeStatus


class DashboardRepository(Protocol):
    """Independent counters; each call may run on its own thread."""

    def count_employees(self, *, status: Optional[EmployeeStatus] = None) -> int:
        raise NotImplementedError

    def count_attendance(self, *, attendance_date: date, status: AttendanceStatus) -> int:
        raise NotImplementedError

    def count_pending_leaves(self) -> int:
        raise NotImplementedError

    def count_pending_members(self) -> int:
        raise NotImplementedError
