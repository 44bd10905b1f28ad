from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import pytest

from favfilms.domain.errors import NotFound, StorageError, ValidationError
from favfilms.services.catalog.service import CatalogService, parse_page


@dataclass
class _Row:
    id: int
    title: str
    fields: Dict[str, Any] = field(default_factory=dict)


class InMemoryCatalogStore:
    """Fake CatalogStorePort keeping rows in insertion order."""

    def __init__(self) -> None:
        self.rows: Dict[int, _Row] = {}
        self._next_id = 1

    def create(self, fields: Mapping[str, Any]) -> _Row:
        row = _Row(id=self._next_id, title=fields["title"], fields=dict(fields))
        self.rows[row.id] = row
        self._next_id += 1
        return row

    def get(self, entry_id: int) -> Optional[_Row]:
        return self.rows.get(entry_id)

    def list_page(self, *, offset: int, limit: int) -> List[_Row]:
        return list(self.rows.values())[offset: offset + limit]

    def count(self) -> int:
        return len(self.rows)

    def update(self, entry_id: int, fields: Mapping[str, Any]) -> Optional[_Row]:
        row = self.rows.get(entry_id)
        if row is None:
            return None
        row.fields.update(fields)
        row.title = row.fields["title"]
        return row

    def delete(self, entry_id: int) -> bool:
        return self.rows.pop(entry_id, None) is not None


class _BrokenStore(InMemoryCatalogStore):
    def list_page(self, *, offset: int, limit: int):
        raise StorageError("connection refused")

    def count(self) -> int:
        raise StorageError("connection refused")


class _CountingStore(InMemoryCatalogStore):
    def __init__(self) -> None:
        super().__init__()
        self.page_queries = 0

    def list_page(self, *, offset: int, limit: int):
        self.page_queries += 1
        return super().list_page(offset=offset, limit=limit)


@pytest.fixture()
def store() -> InMemoryCatalogStore:
    return InMemoryCatalogStore()


@pytest.fixture()
def svc(store) -> CatalogService:
    return CatalogService(store, page_size=10)


def _fill(svc, n):
    for i in range(1, n + 1):
        svc.create_entry({"title": f"T{i}"})


@pytest.mark.parametrize(
    "page,expected_len,expected_more",
    [(1, 10, True), (2, 10, True), (3, 5, False), (4, 0, False)],
)
def test_pagination(svc, page, expected_len, expected_more):
    _fill(svc, 25)
    result = svc.list_entries(page)
    assert len(result.items) == expected_len
    assert result.has_more is expected_more
    assert result.offset == (page - 1) * 10


def test_pages_are_in_insertion_order(svc):
    _fill(svc, 12)
    assert [r.title for r in svc.list_entries(2).items] == ["T11", "T12"]


@pytest.mark.parametrize("raw,expected", [(None, 1), ("", 1), ("x", 1), ("0", 1), (-2, 1), ("3", 3), (2, 2), (True, 1)])
def test_parse_page(raw, expected):
    assert parse_page(raw) == expected


def test_update_then_read(svc):
    created = svc.create_entry({"title": "Dune", "director": "Villeneuve"})
    svc.update_entry(created.id, {"title": "X"})
    got = svc.get_entry(created.id)
    assert got.title == "X"
    assert got.fields["director"] == "Villeneuve"


def test_update_missing_is_not_found(svc):
    with pytest.raises(NotFound):
        svc.update_entry(99, {"title": "X"})


def test_delete_twice(svc):
    created = svc.create_entry({"title": "Dune"})
    svc.delete_entry(created.id)
    with pytest.raises(NotFound):
        svc.delete_entry(created.id)


def test_get_missing_is_not_found(svc):
    with pytest.raises(NotFound):
        svc.get_entry(1)


def test_create_requires_fields(svc):
    with pytest.raises(ValidationError):
        svc.create_entry({})


def test_storage_errors_pass_through():
    svc = CatalogService(_BrokenStore(), page_size=10)
    with pytest.raises(StorageError, match="connection refused"):
        svc.list_entries(1)


def test_page_size_must_be_positive(store):
    with pytest.raises(ValueError):
        CatalogService(store, page_size=0)


def test_page_past_the_end_skips_the_store_query():
    store = _CountingStore()
    svc = CatalogService(store, page_size=10)
    _fill(svc, 3)

    result = svc.list_entries("99999999999999999999")
    assert result.page == 99999999999999999999
    assert result.items == [] and result.has_more is False
    assert result.total == 3
    assert store.page_queries == 0

    svc.list_entries(1)
    assert store.page_queries == 1
