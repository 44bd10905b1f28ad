# favfilms/services/catalog/service.py
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from favfilms.common.logging import get_logger
from favfilms.domain.entities.catalog_page import CatalogPage
from favfilms.domain.errors import NotFound, ValidationError
from favfilms.domain.ports.catalog import CatalogStorePort

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 10


def parse_page(raw: Union[str, int, None]) -> int:
    """Page number from a query value; absent, non-numeric or < 1 means page 1."""
    if raw is None or isinstance(raw, bool):
        return 1
    try:
        page = int(str(raw).strip())
    except ValueError:
        return 1
    return page if page >= 1 else 1


class CatalogService:
    """
    Paginated CRUD over the shared catalog. Every failure is terminal for the
    request (no retries); store failures arrive here already as StorageError
    and pass straight through.
    """

    def __init__(self, store: CatalogStorePort, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self.store = store
        self.page_size = page_size

    def list_entries(self, page: Union[str, int, None] = None) -> CatalogPage:
        p = parse_page(page)
        offset = (p - 1) * self.page_size
        total = self.store.count()
        if offset >= total:
            # past the end; also keeps huge offsets away from the driver
            return CatalogPage(items=[], page=p, page_size=self.page_size, total=total)
        rows = self.store.list_page(offset=offset, limit=self.page_size)
        return CatalogPage(items=list(rows)[: self.page_size], page=p, page_size=self.page_size, total=total)

    def get_entry(self, entry_id: int):
        row = self.store.get(entry_id)
        if row is None:
            raise NotFound(f"Entry {entry_id} not found")
        return row

    def create_entry(self, fields: Mapping[str, Any]):
        if not fields:
            raise ValidationError("Entry fields are required")
        row = self.store.create(fields)
        logger.info("Created entry id=%s title=%r", row.id, row.title)
        return row

    def update_entry(self, entry_id: int, changes: Mapping[str, Any]):
        row: Optional[Any] = self.store.update(entry_id, changes)
        if row is None:
            raise NotFound(f"Entry {entry_id} not found")
        logger.info("Updated entry id=%s fields=%s", entry_id, sorted(changes))
        return row

    def delete_entry(self, entry_id: int) -> None:
        if not self.store.delete(entry_id):
            raise NotFound(f"Entry {entry_id} not found")
        logger.info("Deleted entry id=%s", entry_id)
