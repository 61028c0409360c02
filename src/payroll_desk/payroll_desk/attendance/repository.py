from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceLogRow, AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, attendance_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_sign_in(
        self,
        *,
        record_id: str,
        employee_id: str,
        attendance_date: date,
        sign_in: datetime,
        status: AttendanceStatus,
    ) -> None:
        """Raises AlreadyClockedInError when a record for that day exists."""

        raise NotImplementedError

    def close(self, *, record_id: str, sign_out: datetime, total_hours: Decimal) -> bool:
        """Set sign-out only while the record is still open; False otherwise."""

        raise NotImplementedError

    def list_log(
        self,
        *,
        attendance_date: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceLogRow]:
        """Newest date first, then newest sign-in."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
