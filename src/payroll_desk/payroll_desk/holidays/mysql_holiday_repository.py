from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Holiday
from .repository import HolidayRepository

_SELECT = "SELECT id, name, holiday_date, description, created_at FROM holidays"


def _to_holiday(r) -> Holiday:
    return Holiday(
        id=str(r["id"]),
        name=r["name"],
        holiday_date=r["holiday_date"],
        description=r.get("description"),
        created_at=r.get("created_at"),
    )


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY holiday_date ASC")
            return [_to_holiday(r) for r in fetchall(cur)]

    def get_by_id(self, holiday_id: str) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (holiday_id,))
            r = fetchone(cur)
            return _to_holiday(r) if r else None

    def create(self, holiday: Holiday) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO holidays(id, name, holiday_date, description) VALUES(%s,%s,%s,%s)",
                (holiday.id, holiday.name, holiday.holiday_date, holiday.description),
            )

    def update(self, holiday: Holiday) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE holidays SET name=%s, holiday_date=%s, description=%s WHERE id=%s",
                (holiday.name, holiday.holiday_date, holiday.description, holiday.id),
            )

    def delete(self, holiday_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE id=%s", (holiday_id,))
            return cur.rowcount > 0
