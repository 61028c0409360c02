from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import PayrollStatus
from .model import PayrollInputRow, PayrollLine, PayrollRecord


class PayrollRepository(Protocol):
    def attendance_counts(self, *, start_date: date, end_date: date) -> Sequence[PayrollInputRow]:
        """Every employee with the number of attendance rows dated in the range."""

        raise NotImplementedError

    def upsert_lines(self, lines: Sequence[PayrollLine]) -> None:
        """Insert or overwrite one row per (employee, month, year); status is kept on overwrite."""

        raise NotImplementedError

    def list_for_period(self, *, month: int, year: int) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def set_status(self, *, payroll_id: str, status: PayrollStatus) -> bool:
        raise NotImplementedError

    def get_by_id(self, payroll_id: str) -> Optional[PayrollRecord]:
        raise NotImplementedError
