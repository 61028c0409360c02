from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Holiday:
    id: str
    name: str
    holiday_date: date
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        # Clients send and receive the day as "date".
        data = asdict(self)
        return {"date" if key == "holiday_date" else key: value for key, value in data.items()}
