from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..core.enums import AttendanceStatus, EmployeeStatus, RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import DashboardRepository


class MySQLDashboardRepository(DashboardRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _count(self, sql: str, params: Sequence[Any] = ()) -> int:
        # db_cursor opens a fresh connection, so concurrent counters never share one.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def count_employees(self, *, status: Optional[EmployeeStatus] = None) -> int:
        if status is None:
            return self._count("SELECT COUNT(*) AS total FROM employees")
        return self._count("SELECT COUNT(*) AS total FROM employees WHERE status=%s", (status.value,))

    def count_attendance(self, *, attendance_date: date, status: AttendanceStatus) -> int:
        return self._count(
            "SELECT COUNT(*) AS total FROM attendance WHERE attendance_date=%s AND status=%s",
            (attendance_date, status.value),
        )

    def count_pending_leaves(self) -> int:
        return self._count(
            "SELECT COUNT(*) AS total FROM leave_requests WHERE status=%s",
            (RequestStatus.PENDING.value,),
        )

    def count_pending_members(self) -> int:
        return self._count(
            "SELECT COUNT(*) AS total FROM new_member WHERE status=%s",
            (RequestStatus.PENDING.value,),
        )
