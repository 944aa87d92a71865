from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EntryType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import NewTimeEntry, TimeEntry
from .repository import TimeEntryRepository

_SELECT = """
    SELECT entry_id, employee_id, entry_date, entry_type, description, location, created_at
    FROM time_entries
"""


def _row_to_entry(r: dict) -> TimeEntry:
    return TimeEntry(
        entry_id=int(r["entry_id"]),
        employee_id=int(r["employee_id"]),
        entry_date=r["entry_date"],
        entry_type=EntryType(r["entry_type"]) if r.get("entry_type") else None,
        description=r.get("description"),
        location=r.get("location"),
        created_at=r.get("created_at"),
    )


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE entry_id=%s", (int(entry_id),))
            r = fetchone(cur)
            return _row_to_entry(r) if r else None

    def create(self, entry: NewTimeEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_entries(employee_id, entry_date, entry_type, description, location)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    int(entry.employee_id),
                    entry.entry_date,
                    entry.entry_type.value if entry.entry_type else None,
                    entry.description,
                    entry.location,
                ),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM time_entries WHERE entry_id=%s", (int(entry_id),))
            return cur.rowcount > 0

    def list_for_employee(self, employee_id: int) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE employee_id=%s ORDER BY entry_date ASC, entry_id ASC",
                (int(employee_id),),
            )
            return [_row_to_entry(r) for r in fetchall(cur)]

    def count_for_employee(self, employee_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM time_entries WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def list_recent_for_employee(self, employee_id: int, *, limit: int, offset: int = 0) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                {_SELECT}
                WHERE employee_id=%s
                ORDER BY entry_date DESC, entry_id DESC
                LIMIT %s OFFSET %s
                """,
                (int(employee_id), int(limit), int(offset)),
            )
            return [_row_to_entry(r) for r in fetchall(cur)]

    def get_latest_for_employee(self, employee_id: int) -> Optional[TimeEntry]:
        rows = self.list_recent_for_employee(employee_id, limit=1)
        return rows[0] if rows else None
