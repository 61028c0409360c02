from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from .connection import DatabaseConnection

DUPLICATE_KEY = errorcode.ER_DUP_ENTRY
ROW_IS_REFERENCED = errorcode.ER_ROW_IS_REFERENCED_2
NO_REFERENCED_ROW = errorcode.ER_NO_REFERENCED_ROW_2


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection, one transaction: commit on success, rollback on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def is_integrity_error(exc: BaseException, errno: int) -> bool:
    return isinstance(exc, mysql.connector.IntegrityError) and exc.errno == errno


def duplicate_key_name(exc: mysql.connector.Error) -> str:
    """Name of the unique key that was violated ('' when unknown)."""
    msg = str(getattr(exc, "msg", "") or exc)
    marker = "for key '"
    start = msg.find(marker)
    if start < 0:
        return ""
    name = msg[start + len(marker):].split("'", 1)[0]
    return name.rsplit(".", 1)[-1]
