from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyClockedInError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import DUPLICATE_KEY, NO_REFERENCED_ROW, db_cursor, fetchall, fetchone, is_integrity_error
from .model import AttendanceLogRow, AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r) -> AttendanceRecord:
    return AttendanceRecord(
        id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        attendance_date=r["attendance_date"],
        sign_in=r.get("sign_in"),
        sign_out=r.get("sign_out"),
        status=AttendanceStatus(r["status"]),
        total_hours=Decimal(r["total_hours"]) if r.get("total_hours") is not None else None,
        created_at=r.get("created_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, attendance_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, attendance_date, sign_in, sign_out, status, total_hours, created_at
                FROM attendance
                WHERE employee_id=%s AND attendance_date=%s
                """,
                (employee_id, attendance_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_sign_in(
        self,
        *,
        record_id: str,
        employee_id: str,
        attendance_date: date,
        sign_in: datetime,
        status: AttendanceStatus,
    ) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance(id, employee_id, attendance_date, sign_in, status)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (record_id, employee_id, attendance_date, sign_in, status.value),
                )
        except mysql.connector.IntegrityError as e:
            if is_integrity_error(e, DUPLICATE_KEY):
                raise AlreadyClockedInError("Employee already clocked in today")
            if is_integrity_error(e, NO_REFERENCED_ROW):
                raise NotFoundError("Employee not found")
            raise

    def close(self, *, record_id: str, sign_out: datetime, total_hours: Decimal) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET sign_out=%s, total_hours=%s
                WHERE id=%s AND sign_out IS NULL
                """,
                (sign_out, total_hours, record_id),
            )
            return cur.rowcount > 0

    def list_log(
        self,
        *,
        attendance_date: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceLogRow]:
        clauses = ["1=1"]
        params: list[object] = []

        if attendance_date is not None:
            clauses.append("a.attendance_date=%s")
            params.append(attendance_date)
        if employee_id is not None:
            clauses.append("a.employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.id, a.employee_id, e.full_name, e.position, e.department,
                       a.attendance_date, a.sign_in, a.sign_out, a.status, a.total_hours
                FROM attendance a
                JOIN employees e ON e.id = a.employee_id
                WHERE {where}
                ORDER BY a.attendance_date DESC, a.sign_in DESC
                """,
                tuple(params),
            )
            return [
                AttendanceLogRow(
                    id=str(r["id"]),
                    employee_id=str(r["employee_id"]),
                    full_name=r["full_name"],
                    position=r.get("position"),
                    department=r.get("department"),
                    attendance_date=r["attendance_date"],
                    sign_in=r.get("sign_in"),
                    sign_out=r.get("sign_out"),
                    status=AttendanceStatus(r["status"]),
                    total_hours=Decimal(r["total_hours"]) if r.get("total_hours") is not None else None,
                )
                for r in fetchall(cur)
            ]

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, attendance_date, sign_in, sign_out, status, total_hours, created_at
                FROM attendance
                WHERE employee_id=%s
                ORDER BY attendance_date DESC
                """,
                (employee_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]
