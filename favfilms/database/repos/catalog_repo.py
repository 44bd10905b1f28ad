# favfilms/database/repos/catalog_repo.py
from __future__ import annotations

from typing import Any, Mapping, Optional, List

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from favfilms.common.logging import get_logger
from favfilms.database.models.catalog import CatalogEntry as DBCatalogEntry
from favfilms.database.repos._errors import storage_error

logger = get_logger(__name__)

# Columns a caller may write; id and timestamps are server-assigned.
WRITABLE_FIELDS = frozenset({
    "title", "type", "director", "budget", "location", "duration",
    "year_or_time", "genre", "rating", "description",
})


class SqlAlchemyCatalogRepo:
    """
    SQLAlchemy-backed catalog store. Satisfies CatalogStorePort via structural typing.
    Any SQLAlchemy failure surfaces as StorageError with the driver message.
    """

    def __init__(self, session: Session) -> None:
        self.db = session

    def get(self, entry_id: int) -> Optional[DBCatalogEntry]:
        try:
            return self.db.get(DBCatalogEntry, entry_id)
        except SQLAlchemyError as e:
            raise storage_error(e) from e

    def list_page(self, *, offset: int, limit: int) -> List[DBCatalogEntry]:
        stmt = (
            select(DBCatalogEntry)
            .order_by(DBCatalogEntry.id.asc())
            .offset(offset)
            .limit(limit)
        )
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise storage_error(e) from e

    def count(self) -> int:
        try:
            return int(self.db.execute(select(func.count()).select_from(DBCatalogEntry)).scalar_one())
        except SQLAlchemyError as e:
            raise storage_error(e) from e

    def create(self, fields: Mapping[str, Any]) -> DBCatalogEntry:
        obj = DBCatalogEntry(**{k: v for k, v in fields.items() if k in WRITABLE_FIELDS})
        try:
            self.db.add(obj)
            self.db.flush()  # ensure id
            self.db.refresh(obj)
        except SQLAlchemyError as e:
            raise storage_error(e) from e
        logger.debug("Created catalog entry id=%s", obj.id)
        return obj

    def update(self, entry_id: int, fields: Mapping[str, Any]) -> Optional[DBCatalogEntry]:
        """Partial update: only keys present in `fields` change."""
        obj = self.get(entry_id)
        if obj is None:
            return None
        for key, value in fields.items():
            if key in WRITABLE_FIELDS:
                setattr(obj, key, value)
        try:
            self.db.flush()
            self.db.refresh(obj)
        except SQLAlchemyError as e:
            raise storage_error(e) from e
        return obj

    def delete(self, entry_id: int) -> bool:
        obj = self.get(entry_id)
        if obj is None:
            return False
        try:
            self.db.delete(obj)
            self.db.flush()
        except SQLAlchemyError as e:
            raise storage_error(e) from e
        logger.debug("Deleted catalog entry id=%s", entry_id)
        return True
