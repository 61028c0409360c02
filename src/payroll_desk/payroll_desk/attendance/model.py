from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import AttendanceStatus


def _public(row) -> dict:
    return {"date" if key == "attendance_date" else key: value for key, value in asdict(row).items()}


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one day.

    Open while ``sign_out`` is None, closed afterwards.
    """

    id: str
    employee_id: str
    attendance_date: date
    sign_in: Optional[datetime]
    sign_out: Optional[datetime]
    status: AttendanceStatus = AttendanceStatus.PRESENT
    total_hours: Optional[Decimal] = None
    created_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.sign_out is None

    def to_dict(self) -> dict:
        return _public(self)


@dataclass(frozen=True)
class AttendanceLogRow:
    """Read-model: attendance joined with the employee it belongs to."""

    id: str
    employee_id: str
    full_name: str
    position: Optional[str]
    department: Optional[str]
    attendance_date: date
    sign_in: Optional[datetime]
    sign_out: Optional[datetime]
    status: AttendanceStatus
    total_hours: Optional[Decimal]

    def to_dict(self) -> dict:
        return _public(self)
