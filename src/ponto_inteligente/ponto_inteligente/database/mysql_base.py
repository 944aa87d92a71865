from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DuplicateRecordError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    active = conn_factory.current_transaction()
    if active is not None:
        # Commit/rollback belong to the enclosing transaction().
        cur = active.cursor(dictionary=dictionary)
        try:
            yield active, cur
        finally:
            cur.close()
        return

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


@contextmanager
def translate_duplicate_key(fields_by_key: Mapping[str, str]):
    """Turn MySQL duplicate-key errors into DuplicateRecordError.

    ``fields_by_key`` maps unique constraint names to domain field names.
    """

    try:
        yield
    except mysql.connector.IntegrityError as exc:
        if exc.errno != errorcode.ER_DUP_ENTRY:
            raise
        message = str(getattr(exc, "msg", "") or exc)
        for key, field in fields_by_key.items():
            if key in message:
                raise DuplicateRecordError(field, message) from exc
        raise
