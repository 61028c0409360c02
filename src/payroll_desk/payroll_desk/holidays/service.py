from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Any, Mapping, Sequence

from ..common.validators import optional_str, parse_date, require_non_empty
from ..core.exceptions import NotFoundError
from .model import Holiday
from .repository import HolidayRepository


class HolidayService:
    """Owner-maintained holiday calendar."""

    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_all(self) -> Sequence[Holiday]:
        return self._holidays.list_all()

    def create(self, payload: Mapping[str, Any]) -> Holiday:
        holiday = Holiday(
            id=str(uuid.uuid4()),
            name=require_non_empty(payload.get("name"), "Name"),
            holiday_date=parse_date(payload.get("date"), "Date"),
            description=optional_str(payload.get("description")),
        )
        self._holidays.create(holiday)
        return holiday

    def update(self, holiday_id: str, payload: Mapping[str, Any]) -> Holiday:
        current = self._holidays.get_by_id(holiday_id)
        if not current:
            raise NotFoundError("Holiday not found")

        changes = {}
        if "name" in payload:
            changes["name"] = require_non_empty(payload.get("name"), "Name")
        if "date" in payload:
            changes["holiday_date"] = parse_date(payload.get("date"), "Date")
        if "description" in payload:
            changes["description"] = optional_str(payload.get("description"))

        updated = replace(current, **changes)
        self._holidays.update(updated)
        return updated

    def delete(self, holiday_id: str) -> None:
        if not self._holidays.delete(holiday_id):
            raise NotFoundError("Holiday not found")
