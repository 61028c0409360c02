from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import DUPLICATE_KEY, db_cursor, fetchone, is_integrity_error
from .model import Admin
from .repository import AdminRepository


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, email, password_hash FROM admins WHERE email=%s", (email,))
            r = fetchone(cur)
            if not r:
                return None
            return Admin(id=str(r["id"]), email=r["email"], password_hash=r["password_hash"])

    def create(self, admin: Admin) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO admins(id, email, password_hash) VALUES(%s,%s,%s)",
                    (admin.id, admin.email, admin.password_hash),
                )
        except mysql.connector.IntegrityError as e:
            if is_integrity_error(e, DUPLICATE_KEY):
                raise ValidationError("An owner account with this email already exists")
            raise
