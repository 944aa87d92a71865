from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from ..common.pagination import Page, PageRequest
from ..common.validators import require_positive_int
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.exceptions import PersistenceError, ValidationError
from .model import NewTimeEntry, TimeEntry
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


class TimeEntryService:
    """Use case: gravar e consultar lançamentos de um funcionário.

    Entries are independent timestamped records; no in/out sequencing is enforced.
    """

    def __init__(self, entries: TimeEntryRepository, *, default_page_size: int = DEFAULT_PAGE_SIZE):
        self._entries = entries
        self._default_page_size = int(default_page_size)

    def create(self, entry: NewTimeEntry) -> TimeEntry:
        require_positive_int(entry.employee_id, "Funcionário")
        if not isinstance(entry.entry_date, datetime):
            raise ValidationError("Data do lançamento é obrigatória.")

        entry_id = self._entries.create(entry)
        stored = self._entries.get_by_id(entry_id)
        if stored is None:
            raise PersistenceError(f"Lançamento {entry_id} não encontrado após gravação")

        logger.info("Lançamento %s gravado para funcionário %s", stored.entry_id, stored.employee_id)
        return stored

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        return self._entries.get_by_id(int(entry_id))

    def remove(self, entry_id: int) -> None:
        if self._entries.delete_by_id(int(entry_id)):
            logger.info("Lançamento %s removido", entry_id)
        else:
            logger.debug("Lançamento %s inexistente, nada a remover", entry_id)

    def list_all(self, employee_id: int) -> List[TimeEntry]:
        return list(self._entries.list_for_employee(int(employee_id)))

    def list_page(self, employee_id: int, page: int = 0, page_size: Optional[int] = None) -> Page[TimeEntry]:
        request = PageRequest.of(page, self._default_page_size if page_size is None else page_size)
        logger.debug("Buscando lançamentos do funcionário %s, página %s", employee_id, request.page)

        total = self._entries.count_for_employee(int(employee_id))
        items = self._entries.list_recent_for_employee(int(employee_id), limit=request.size, offset=request.offset)
        return Page(items=list(items), page=request.page, size=request.size, total_items=total)

    def most_recent(self, employee_id: int) -> Optional[TimeEntry]:
        return self._entries.get_latest_for_employee(int(employee_id))
