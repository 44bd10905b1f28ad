# favfilms/services/mappers/catalog_entry.py
from __future__ import annotations

from favfilms.domain.entities.catalog_page import CatalogPage
from favfilms.domain.enums import EntryType
from favfilms.services.schemas.entries import EntryPage, EntryRead


def to_read_schema(row) -> EntryRead:
    return EntryRead(
        id=row.id,
        title=row.title,
        type=EntryType.parse(row.type),
        director=row.director,
        budget=row.budget,
        location=row.location,
        duration=row.duration,
        year_or_time=row.year_or_time,
        genre=row.genre,
        rating=row.rating,
        description=row.description,
        created_at=getattr(row, "date_created", None),
        updated_at=getattr(row, "last_updated", None),
    )


def to_page_schema(page: CatalogPage) -> EntryPage:
    return EntryPage(
        data=[to_read_schema(r) for r in page.items],
        has_more=page.has_more,
        page=page.page,
        page_size=page.page_size,
        total=page.total,
    )
