from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import MonthCalculationType, PayrollStatus


@dataclass(frozen=True)
class PayrollInputRow:
    """Read-model: one employee with the attendance count for a period."""

    employee_id: str
    full_name: str
    work_rate: Decimal
    month_calculation_type: MonthCalculationType
    present_days: int


@dataclass(frozen=True)
class PayrollLine:
    """Computed pay for one employee and month, before it is stored."""

    employee_id: str
    month: int
    year: int
    present_days: int
    total_days: int
    gross_salary: Decimal
    net_payable: Decimal


@dataclass(frozen=True)
class PayrollRecord:
    id: str
    employee_id: str
    full_name: str
    month: int
    year: int
    present_days: int
    gross_salary: Decimal
    net_payable: Decimal
    status: PayrollStatus = PayrollStatus.DRAFT
    created_at: Optional[datetime] = None
