from __future__ import annotations

from decimal import Decimal

from ...common.datetime_utils import round_money
from ...core.constants import CALENDAR_MONTH_DAYS, FIXED_MONTH_DAYS
from ...core.enums import MonthCalculationType
from ..model import PayrollInputRow, PayrollLine
from .base import PayrollCalculator


def days_in_pay_month(calculation_type: MonthCalculationType) -> int:
    if calculation_type == MonthCalculationType.FIXED_26:
        return FIXED_MONTH_DAYS
    return CALENDAR_MONTH_DAYS


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: work_rate / month days * present days. No deductions."""

    def compute(self, row: PayrollInputRow, *, month: int, year: int) -> PayrollLine:
        total_days = days_in_pay_month(row.month_calculation_type)
        gross = round_money(Decimal(row.work_rate) / Decimal(total_days) * Decimal(row.present_days))
        return PayrollLine(
            employee_id=row.employee_id,
            month=month,
            year=year,
            present_days=int(row.present_days),
            total_days=total_days,
            gross_salary=gross,
            # pf/esi/tds flags exist on the employee but no deduction rules are defined
            net_payable=gross,
        )
