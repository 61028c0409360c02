from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import hours_between, now_local
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyClockedInError, NoActiveSessionError, NotFoundError
from ..employees.repository import EmployeeRepository
from .model import AttendanceLogRow, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def clock_in(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        if self._attendance.get_for_employee_and_date(employee_id, today):
            raise AlreadyClockedInError("Employee already clocked in today")

        record = AttendanceRecord(
            id=str(uuid.uuid4()),
            employee_id=employee_id,
            attendance_date=today,
            sign_in=now,
            sign_out=None,
            status=AttendanceStatus.PRESENT,
        )
        # The unique (employee, date) key settles concurrent clock-ins.
        self._attendance.create_sign_in(
            record_id=record.id,
            employee_id=employee_id,
            attendance_date=today,
            sign_in=now,
            status=record.status,
        )
        logger.info("clock-in employee=%s at %s", employee_id, now.isoformat(timespec="seconds"))
        return record

    def clock_out(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_local()

        record = self._attendance.get_for_employee_and_date(employee_id, now.date())
        if not record or not record.is_open or record.sign_in is None:
            raise NoActiveSessionError("No active clock-in found for today")

        total_hours = hours_between(record.sign_in, now)
        if not self._attendance.close(record_id=record.id, sign_out=now, total_hours=total_hours):
            raise NoActiveSessionError("No active clock-in found for today")

        logger.info("clock-out employee=%s hours=%s", employee_id, total_hours)
        return replace(record, sign_out=now, total_hours=total_hours)

    def list_log(
        self,
        *,
        attendance_date: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceLogRow]:
        return self._attendance.list_log(attendance_date=attendance_date, employee_id=employee_id)

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_employee(employee_id)
