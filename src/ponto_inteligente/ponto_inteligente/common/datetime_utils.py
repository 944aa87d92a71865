from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.constants import DATETIME_FORMAT
from ..core.exceptions import ValidationError


def parse_entry_datetime(value: str) -> datetime:
    """Parse 'YYYY-MM-DD HH:MM:SS' string into datetime."""
    try:
        return datetime.strptime(str(value or "").strip(), DATETIME_FORMAT)
    except ValueError:
        raise ValidationError("Data inválida.")


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.strftime(DATETIME_FORMAT) if value else None

