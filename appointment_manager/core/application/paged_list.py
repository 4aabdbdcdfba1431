"""
Paged list container.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PagedList(Generic[T]):
    """
    One page of results.

    ``page`` is 1-based. No clamping or validation is performed on
    ``page`` / ``page_size``; callers supply values >= 1.
    """

    items: Sequence[T] = field(default_factory=tuple)
    page: int = 1
    page_size: int = 10
    total_count: int = 0

    @property
    def has_next_page(self) -> bool:
        return self.page * self.page_size < self.total_count

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    @classmethod
    def create(cls, items: Sequence[T], page: int, page_size: int, total_count: int) -> "PagedList[T]":
        return cls(items=tuple(items), page=page, page_size=page_size, total_count=total_count)

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": list(self.items),
            "page": self.page,
            "page_size": self.page_size,
            "total_count": self.total_count,
            "has_next_page": self.has_next_page,
            "has_previous_page": self.has_previous_page,
        }
