from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import MonthCalculationType, PayrollStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PayrollInputRow, PayrollLine, PayrollRecord
from .repository import PayrollRepository

_SELECT = """
    SELECT p.id, p.employee_id, e.full_name, p.month, p.year, p.present_days,
           p.gross_salary, p.net_payable, p.status, p.created_at
    FROM payroll p
    JOIN employees e ON e.id = p.employee_id
"""


def _to_record(r) -> PayrollRecord:
    return PayrollRecord(
        id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        full_name=r["full_name"],
        month=int(r["month"]),
        year=int(r["year"]),
        present_days=int(r["present_days"]),
        gross_salary=Decimal(r["gross_salary"]),
        net_payable=Decimal(r["net_payable"]),
        status=PayrollStatus(r["status"]),
        created_at=r.get("created_at"),
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def attendance_counts(self, *, start_date: date, end_date: date) -> Sequence[PayrollInputRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.id, e.full_name, e.work_rate, e.month_calculation_type,
                       COUNT(a.id) AS present_days
                FROM employees e
                LEFT JOIN attendance a
                       ON a.employee_id = e.id
                      AND a.attendance_date BETWEEN %s AND %s
                GROUP BY e.id, e.full_name, e.work_rate, e.month_calculation_type
                ORDER BY e.full_name
                """,
                (start_date, end_date),
            )
            return [
                PayrollInputRow(
                    employee_id=str(r["id"]),
                    full_name=r["full_name"],
                    work_rate=Decimal(r["work_rate"]),
                    month_calculation_type=MonthCalculationType(r["month_calculation_type"]),
                    present_days=int(r["present_days"]),
                )
                for r in fetchall(cur)
            ]

    def upsert_lines(self, lines: Sequence[PayrollLine]) -> None:
        if not lines:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO payroll(id, employee_id, month, year, present_days, gross_salary, net_payable, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    present_days=VALUES(present_days),
                    gross_salary=VALUES(gross_salary),
                    net_payable=VALUES(net_payable)
                """,
                [
                    (
                        str(uuid.uuid4()),
                        line.employee_id,
                        line.month,
                        line.year,
                        line.present_days,
                        line.gross_salary,
                        line.net_payable,
                        PayrollStatus.DRAFT.value,
                    )
                    for line in lines
                ],
            )

    def list_for_period(self, *, month: int, year: int) -> Sequence[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE p.month=%s AND p.year=%s ORDER BY e.full_name", (month, year))
            return [_to_record(r) for r in fetchall(cur)]

    def set_status(self, *, payroll_id: str, status: PayrollStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE payroll SET status=%s WHERE id=%s", (status.value, payroll_id))
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM payroll WHERE id=%s", (payroll_id,))
            return fetchone(cur) is not None

    def get_by_id(self, payroll_id: str) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE p.id=%s", (payroll_id,))
            r = fetchone(cur)
            return _to_record(r) if r else None
