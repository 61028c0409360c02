from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence

import mysql.connector

from ..core.enums import EmployeeStatus, EmploymentType, MonthCalculationType, WorkShift
from ..core.exceptions import ConflictError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    DUPLICATE_KEY,
    ROW_IS_REFERENCED,
    db_cursor,
    duplicate_key_name,
    fetchall,
    fetchone,
    is_integrity_error,
)
from .model import EDITABLE_FIELDS, Employee
from .repository import EmployeeRepository

EMPLOYEE_COLUMNS = ("id",) + EDITABLE_FIELDS + ("created_at",)
_SELECT = f"SELECT {', '.join(EMPLOYEE_COLUMNS)} FROM employees"


def row_to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        id=str(r["id"]),
        full_name=r["full_name"],
        dob=r.get("dob"),
        joining_date=r["joining_date"],
        employment_type=EmploymentType(r["employment_type"]),
        work_rate=Decimal(r["work_rate"]),
        month_calculation_type=MonthCalculationType(r.get("month_calculation_type") or "calendar"),
        position=r.get("position"),
        department=r.get("department"),
        shift=WorkShift(r["shift"]) if r.get("shift") else None,
        phone=r.get("phone"),
        email=r.get("email"),
        pf_enabled=bool(r.get("pf_enabled")),
        esi_enabled=bool(r.get("esi_enabled")),
        tds_enabled=bool(r.get("tds_enabled")),
        allowed_leaves=int(r.get("allowed_leaves") or 0),
        taken_leaves=int(r.get("taken_leaves") or 0),
        status=EmployeeStatus(r["status"]),
        created_at=r.get("created_at"),
    )


def to_db_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return int(value)
    return value


def insert_employee(cur, employee: Employee) -> None:
    """INSERT on an open cursor, so callers can share a transaction."""
    columns = ("id",) + EDITABLE_FIELDS
    cur.execute(
        f"INSERT INTO employees({', '.join(columns)}) VALUES({', '.join(['%s'] * len(columns))})",
        tuple(to_db_value(getattr(employee, c)) for c in columns),
    )


def duplicate_employee_error(exc: mysql.connector.Error) -> ValidationError:
    key = duplicate_key_name(exc)
    if "email" in key:
        return ValidationError("An employee with this email already exists")
    if "phone" in key:
        return ValidationError("An employee with this phone number already exists")
    return ValidationError("Employee already exists")


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY created_at DESC")
            return [row_to_employee(r) for r in fetchall(cur)]

    def _get_one(self, column: str, value: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE {column}=%s", (value,))
            r = fetchone(cur)
            return row_to_employee(r) if r else None

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._get_one("id", employee_id)

    def get_by_phone(self, phone: str) -> Optional[Employee]:
        return self._get_one("phone", phone)

    def get_by_email(self, email: str) -> Optional[Employee]:
        return self._get_one("email", email)

    def create(self, employee: Employee) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                insert_employee(cur, employee)
        except mysql.connector.IntegrityError as e:
            if is_integrity_error(e, DUPLICATE_KEY):
                raise duplicate_employee_error(e)
            raise

    def update(self, employee_id: str, changes: Mapping[str, Any]) -> bool:
        columns = [c for c in EDITABLE_FIELDS if c in changes]
        if not columns:
            return self.get_by_id(employee_id) is not None

        assignments = ", ".join(f"{c}=%s" for c in columns)
        params = tuple(to_db_value(changes[c]) for c in columns) + (employee_id,)
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(f"UPDATE employees SET {assignments} WHERE id=%s", params)
                if cur.rowcount > 0:
                    return True
                # MySQL reports 0 affected rows when values did not change.
                cur.execute("SELECT 1 AS found FROM employees WHERE id=%s", (employee_id,))
                return fetchone(cur) is not None
        except mysql.connector.IntegrityError as e:
            if is_integrity_error(e, DUPLICATE_KEY):
                raise duplicate_employee_error(e)
            raise

    def delete(self, employee_id: str) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
                return cur.rowcount > 0
        except mysql.connector.IntegrityError as e:
            if is_integrity_error(e, ROW_IS_REFERENCED):
                raise ConflictError(
                    "Employee still has attendance, break, leave or payroll records; mark them inactive instead"
                )
            raise
