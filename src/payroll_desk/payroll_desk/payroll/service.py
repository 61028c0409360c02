from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.datetime_utils import month_bounds
from ..common.validators import parse_enum, parse_int, require_non_empty
from ..core.constants import MAX_PAYROLL_YEAR, MIN_PAYROLL_YEAR
from ..core.enums import PayrollStatus
from ..core.exceptions import NotFoundError
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRecord
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


def parse_period(month: Any, year: Any) -> tuple[int, int]:
    return (
        parse_int(month, "Month", minimum=1, maximum=12),
        parse_int(year, "Year", minimum=MIN_PAYROLL_YEAR, maximum=MAX_PAYROLL_YEAR),
    )


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._calculator = calculator or StandardPayrollCalculator()

    def calculate(self, month: Any, year: Any) -> Sequence[PayrollRecord]:
        """Recompute the month for every employee and return the stored rows."""

        month, year = parse_period(month, year)
        start, end = month_bounds(year, month)

        rows = self._payroll.attendance_counts(start_date=start, end_date=end)
        lines = [self._calculator.compute(r, month=month, year=year) for r in rows]
        self._payroll.upsert_lines(lines)

        logger.info("payroll calculated %02d/%d employees=%d", month, year, len(lines))
        return self._payroll.list_for_period(month=month, year=year)

    def list_for_period(self, month: Any, year: Any) -> Sequence[PayrollRecord]:
        month, year = parse_period(month, year)
        return self._payroll.list_for_period(month=month, year=year)

    def set_status(self, payroll_id: str, status: Any) -> PayrollRecord:
        new_status = parse_enum(PayrollStatus, require_non_empty(status, "Status"), "Status")
        if not self._payroll.set_status(payroll_id=payroll_id, status=new_status):
            raise NotFoundError("Payroll record not found")
        record = self._payroll.get_by_id(payroll_id)
        if not record:
            raise NotFoundError("Payroll record not found")
        logger.info("payroll %s -> %s", payroll_id, new_status.value)
        return record
