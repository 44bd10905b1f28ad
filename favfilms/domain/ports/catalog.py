from __future__ import annotations
from typing import Any, Mapping, Optional, Protocol, Sequence, TypeVar

Row = TypeVar("Row")


class CatalogStorePort(Protocol[Row]):
    def create(self, fields: Mapping[str, Any]) -> Row: ...
    def get(self, entry_id: int) -> Optional[Row]: ...
    def list_page(self, *, offset: int, limit: int) -> Sequence[Row]: ...
    def count(self) -> int: ...
    def update(self, entry_id: int, fields: Mapping[str, Any]) -> Optional[Row]: ...
    def delete(self, entry_id: int) -> bool: ...
