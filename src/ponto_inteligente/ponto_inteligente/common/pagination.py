from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

from ..core.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """Zero-indexed page window."""

    page: int
    size: int

    @classmethod
    def of(cls, page: int, size: int) -> "PageRequest":
        if page < 0:
            raise ValidationError("Página inválida.")
        if size < 1:
            raise ValidationError("Tamanho de página inválido.")
        return cls(page=int(page), size=int(size))

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    items: Sequence[T]
    page: int
    size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.size) if self.size else 0

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return self.page >= self.total_pages - 1

    @property
    def has_next(self) -> bool:
        return not self.is_last

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    def to_dict(self, serialize: Callable[[T], dict]) -> dict:
        return {
            "content": [serialize(item) for item in self.items],
            "number": self.page,
            "size": self.size,
            "numberOfElements": len(self.items),
            "totalElements": self.total_items,
            "totalPages": self.total_pages,
            "first": self.is_first,
            "last": self.is_last,
        }
