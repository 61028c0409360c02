from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.constants import DEFAULT_ALLOWED_LEAVES
from ..core.enums import EmployeeStatus, EmploymentType, MonthCalculationType, WorkShift


@dataclass(frozen=True)
class Employee:
    """Domain entity: a tracked worker.

    Plain data object; persistence lives in the repositories.
    """

    id: str
    full_name: str
    joining_date: date
    employment_type: EmploymentType
    work_rate: Decimal
    month_calculation_type: MonthCalculationType = MonthCalculationType.CALENDAR
    dob: Optional[date] = None
    position: Optional[str] = None
    department: Optional[str] = None
    shift: Optional[WorkShift] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    pf_enabled: bool = False
    esi_enabled: bool = False
    tds_enabled: bool = False
    allowed_leaves: int = DEFAULT_ALLOWED_LEAVES
    taken_leaves: int = 0
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    created_at: Optional[datetime] = None


# Columns an owner may set through create/update, in table order.
EDITABLE_FIELDS = (
    "full_name",
    "dob",
    "joining_date",
    "employment_type",
    "work_rate",
    "month_calculation_type",
    "position",
    "department",
    "shift",
    "phone",
    "email",
    "pf_enabled",
    "esi_enabled",
    "tds_enabled",
    "allowed_leaves",
    "taken_leaves",
    "status",
)
