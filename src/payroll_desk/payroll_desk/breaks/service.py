from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local, whole_minutes_between
from ..common.validators import optional_str
from ..core.constants import DEFAULT_BREAK_TYPE
from ..core.exceptions import AlreadyOnBreakError, NoActiveBreakError, NotFoundError
from ..employees.repository import EmployeeRepository
from .model import BreakLogRow, BreakRecord
from .repository import BreakRepository

logger = logging.getLogger(__name__)


class BreakService:
    """Sequential breaks per employee and day; at most one open at a time."""

    def __init__(self, breaks: BreakRepository, employees: EmployeeRepository):
        self._breaks = breaks
        self._employees = employees

    def start(self, employee_id: str, *, break_type: Optional[str] = None, now: Optional[datetime] = None) -> BreakRecord:
        now = now or now_local()

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        if self._breaks.get_open(employee_id, now.date()):
            raise AlreadyOnBreakError("You are already on a break!")

        record = BreakRecord(
            id=str(uuid.uuid4()),
            employee_id=employee_id,
            break_date=now.date(),
            start_time=now,
            break_type=optional_str(break_type) or DEFAULT_BREAK_TYPE,
        )
        self._breaks.create(record)
        logger.info("break started employee=%s type=%s", employee_id, record.break_type)
        return record

    def end(self, employee_id: str, *, now: Optional[datetime] = None) -> BreakRecord:
        now = now or now_local()

        record = self._breaks.get_open(employee_id, now.date())
        if not record:
            raise NoActiveBreakError("No active break found to end")

        minutes = whole_minutes_between(record.start_time, now)
        if not self._breaks.close(record_id=record.id, end_time=now, duration_minutes=minutes):
            raise NoActiveBreakError("No active break found to end")
        return replace(record, end_time=now, duration_minutes=minutes)

    def list_log(self) -> Sequence[BreakLogRow]:
        return self._breaks.list_log()

    def list_for_employee(self, employee_id: str) -> Sequence[BreakRecord]:
        return self._breaks.list_for_employee(employee_id)
