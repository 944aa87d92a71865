from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import NewTimeEntry, TimeEntry


class TimeEntryRepository(Protocol):
    """Ordering contract: "recent" queries sort by (entry_date, entry_id) descending,
    full listings by (entry_date, entry_id) ascending.
    """

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        raise NotImplementedError

    def create(self, entry: NewTimeEntry) -> int:
        raise NotImplementedError

    def delete_by_id(self, entry_id: int) -> bool:
        """Returns False when nothing matched."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def count_for_employee(self, employee_id: int) -> int:
        raise NotImplementedError

    def list_recent_for_employee(self, employee_id: int, *, limit: int, offset: int = 0) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def get_latest_for_employee(self, employee_id: int) -> Optional[TimeEntry]:
        raise NotImplementedError
