from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import DUPLICATE_KEY, db_cursor, fetchall, fetchone, is_integrity_error
from ..employees.model import Employee
from ..employees.mysql_employee_repository import duplicate_employee_error, insert_employee
from .model import Member
from .repository import MemberRepository

_SELECT = "SELECT id, name, number, status, created_at FROM new_member"


def _to_member(r) -> Member:
    return Member(
        id=str(r["id"]),
        name=r["name"],
        number=r["number"],
        status=RequestStatus(r.get("status") or "pending"),
        created_at=r.get("created_at"),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY created_at DESC")
            return [_to_member(r) for r in fetchall(cur)]

    def get_by_id(self, member_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (member_id,))
            r = fetchone(cur)
            return _to_member(r) if r else None

    def create(self, member: Member) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO new_member(id, name, number, status) VALUES(%s,%s,%s,%s)",
                (member.id, member.name, member.number, member.status.value),
            )

    def delete(self, member_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM new_member WHERE id=%s", (member_id,))
            return cur.rowcount > 0

    def convert_to_employee(self, member_id: str, employee: Employee) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT id FROM new_member WHERE id=%s FOR UPDATE", (member_id,))
                if not fetchone(cur):
                    return False
                insert_employee(cur, employee)
                cur.execute("DELETE FROM new_member WHERE id=%s", (member_id,))
                return True
        except mysql.connector.IntegrityError as e:
            if is_integrity_error(e, DUPLICATE_KEY):
                raise duplicate_employee_error(e)
            raise
