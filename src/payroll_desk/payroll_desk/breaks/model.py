from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Optional

from ..core.constants import DEFAULT_BREAK_TYPE


_PUBLIC_NAMES = {"break_date": "date", "break_type": "type"}


def _public(row) -> dict:
    return {_PUBLIC_NAMES.get(key, key): value for key, value in asdict(row).items()}


@dataclass(frozen=True)
class BreakRecord:
    id: str
    employee_id: str
    break_date: date
    start_time: datetime
    end_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    break_type: str = DEFAULT_BREAK_TYPE
    created_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.end_time is None

    def to_dict(self) -> dict:
        return _public(self)


@dataclass(frozen=True)
class BreakLogRow:
    id: str
    employee_id: str
    full_name: str
    break_date: date
    start_time: datetime
    end_time: Optional[datetime]
    duration_minutes: Optional[int]
    break_type: str

    def to_dict(self) -> dict:
        return _public(self)
