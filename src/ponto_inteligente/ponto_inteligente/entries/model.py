from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EntryType


@dataclass(frozen=True)
class NewTimeEntry:
    """Lançamento a ser gravado (sem id)."""

    employee_id: int
    entry_date: datetime
    entry_type: Optional[EntryType] = None
    description: Optional[str] = None
    location: Optional[str] = None


@dataclass(frozen=True)
class TimeEntry:
    """Entidade de domínio: Lançamento (batida de ponto).

    Immutable once stored; only removal by id is allowed.
    """

    entry_id: int
    employee_id: int
    entry_date: datetime
    entry_type: Optional[EntryType] = None
    description: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None
