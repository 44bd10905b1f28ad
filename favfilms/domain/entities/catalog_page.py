# favfilms/domain/entities/catalog_page.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass
class CatalogPage(Generic[T]):
    """
    One page of catalog entries.

    `has_more` is exact: it is computed from the total row count rather than
    from "returned length == page size", so a final page that exactly fills
    page_size reports has_more=False.
    """
    items: List[T] = field(default_factory=list)
    page: int = 1
    page_size: int = 10
    total: int = 0

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("CatalogPage.page must be >= 1")
        if self.page_size < 1:
            raise ValueError("CatalogPage.page_size must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.total
