from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import BreakLogRow, BreakRecord


class BreakRepository(Protocol):
    def get_open(self, employee_id: str, break_date: date) -> Optional[BreakRecord]:
        raise NotImplementedError

    def create(self, record: BreakRecord) -> None:
        """Raises AlreadyOnBreakError when an open break exists for that day."""

        raise NotImplementedError

    def close(self, *, record_id: str, end_time: datetime, duration_minutes: int) -> bool:
        raise NotImplementedError

    def list_log(self) -> Sequence[BreakLogRow]:
        """Newest start first."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[BreakRecord]:
        raise NotImplementedError
