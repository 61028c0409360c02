from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..core.enums import EmployeeStatus, LeaveType, RequestStatus
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import NO_REFERENCED_ROW, db_cursor, fetchall, fetchone, is_integrity_error
from .model import LeaveLogRow, LeaveRequest
from .repository import LeaveRepository

_COLUMNS = "id, employee_id, leave_type, start_date, end_date, reason, status, created_at"


def _to_leave(r) -> LeaveRequest:
    return LeaveRequest(
        id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        leave_type=LeaveType(r["leave_type"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        reason=r.get("reason"),
        status=RequestStatus(r["status"]),
        created_at=r.get("created_at"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, leave: LeaveRequest) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO leave_requests(id, employee_id, leave_type, start_date, end_date, reason, status)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        leave.id,
                        leave.employee_id,
                        leave.leave_type.value,
                        leave.start_date,
                        leave.end_date,
                        leave.reason,
                        leave.status.value,
                    ),
                )
        except mysql.connector.IntegrityError as e:
            if is_integrity_error(e, NO_REFERENCED_ROW):
                raise NotFoundError("Employee not found")
            raise

    def get_by_id(self, leave_id: str) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leave_requests WHERE id=%s", (leave_id,))
            r = fetchone(cur)
            return _to_leave(r) if r else None

    def list_log(self) -> Sequence[LeaveLogRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT l.id, l.employee_id, e.full_name, e.department, e.position,
                       l.leave_type, l.start_date, l.end_date, l.reason, l.status, l.created_at
                FROM leave_requests l
                JOIN employees e ON e.id = l.employee_id
                ORDER BY l.created_at DESC
                """
            )
            return [
                LeaveLogRow(
                    id=str(r["id"]),
                    employee_id=str(r["employee_id"]),
                    full_name=r["full_name"],
                    department=r.get("department"),
                    position=r.get("position"),
                    leave_type=LeaveType(r["leave_type"]),
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    reason=r.get("reason"),
                    status=RequestStatus(r["status"]),
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]

    def list_for_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM leave_requests WHERE employee_id=%s ORDER BY created_at DESC",
                (employee_id,),
            )
            return [_to_leave(r) for r in fetchall(cur)]

    def set_status(
        self,
        *,
        leave_id: str,
        status: RequestStatus,
        employee_status: Optional[EmployeeStatus] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id FROM leave_requests WHERE id=%s FOR UPDATE", (leave_id,))
            r = fetchone(cur)
            if not r:
                return False
            cur.execute("UPDATE leave_requests SET status=%s WHERE id=%s", (status.value, leave_id))
            if employee_status is not None:
                cur.execute(
                    "UPDATE employees SET status=%s WHERE id=%s",
                    (employee_status.value, r["employee_id"]),
                )
            return True
