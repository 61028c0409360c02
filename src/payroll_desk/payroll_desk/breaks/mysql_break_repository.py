from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

import mysql.connector

from ..core.exceptions import AlreadyOnBreakError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import DUPLICATE_KEY, NO_REFERENCED_ROW, db_cursor, fetchall, fetchone, is_integrity_error
from .model import BreakLogRow, BreakRecord
from .repository import BreakRepository

_COLUMNS = "id, employee_id, break_date, start_time, end_time, duration_minutes, break_type, created_at"


def _to_record(r) -> BreakRecord:
    return BreakRecord(
        id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        break_date=r["break_date"],
        start_time=r["start_time"],
        end_time=r.get("end_time"),
        duration_minutes=r.get("duration_minutes"),
        break_type=r.get("break_type") or "General",
        created_at=r.get("created_at"),
    )


class MySQLBreakRepository(BreakRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_open(self, employee_id: str, break_date: date) -> Optional[BreakRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM break_records
                WHERE employee_id=%s AND break_date=%s AND end_time IS NULL
                """,
                (employee_id, break_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(self, record: BreakRecord) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO break_records(id, employee_id, break_date, start_time, break_type)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (record.id, record.employee_id, record.break_date, record.start_time, record.break_type),
                )
        except mysql.connector.IntegrityError as e:
            if is_integrity_error(e, DUPLICATE_KEY):
                raise AlreadyOnBreakError("You are already on a break!")
            if is_integrity_error(e, NO_REFERENCED_ROW):
                raise NotFoundError("Employee not found")
            raise

    def close(self, *, record_id: str, end_time: datetime, duration_minutes: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE break_records
                SET end_time=%s, duration_minutes=%s
                WHERE id=%s AND end_time IS NULL
                """,
                (end_time, int(duration_minutes), record_id),
            )
            return cur.rowcount > 0

    def list_log(self) -> Sequence[BreakLogRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT b.id, b.employee_id, e.full_name, b.break_date, b.start_time,
                       b.end_time, b.duration_minutes, b.break_type
                FROM break_records b
                JOIN employees e ON e.id = b.employee_id
                ORDER BY b.start_time DESC
                """
            )
            return [
                BreakLogRow(
                    id=str(r["id"]),
                    employee_id=str(r["employee_id"]),
                    full_name=r["full_name"],
                    break_date=r["break_date"],
                    start_time=r["start_time"],
                    end_time=r.get("end_time"),
                    duration_minutes=r.get("duration_minutes"),
                    break_type=r.get("break_type") or "General",
                )
                for r in fetchall(cur)
            ]

    def list_for_employee(self, employee_id: str) -> Sequence[BreakRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM break_records WHERE employee_id=%s ORDER BY start_time DESC",
                (employee_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]
