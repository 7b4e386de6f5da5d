"""Pagination value objects shared by every list query."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SearchCriteria:
    """
    Page descriptor for list queries.

    Pages are 1-based; anything below 1 is read as the first page.
    A page size of 0 disables paging and returns every result.
    """

    page_number: int = 1
    page_size: int = 100

    def __post_init__(self) -> None:
        if self.page_number < 1:
            object.__setattr__(self, "page_number", 1)
        if self.page_size < 0:
            raise ValueError("page_size must not be negative")

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    def apply(self, items: List[T]) -> List[T]:
        """Return the slice of ``items`` that falls on this page."""
        if self.page_size == 0:
            return list(items)
        return list(items[self.offset : self.offset + self.page_size])


@dataclass(frozen=True, slots=True)
class SearchResults(Generic[T]):
    """One page of results together with the unpaged total."""

    results: List[T] = field(default_factory=list)
    num_results: int = 0
