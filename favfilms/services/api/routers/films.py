# favfilms/services/api/routers/films.py
from __future__ import annotations

from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from favfilms.services.api.deps import get_catalog_service, require_subject
from favfilms.services.catalog.service import CatalogService
from favfilms.services.mappers.catalog_entry import to_page_schema, to_read_schema
from favfilms.services.schemas import DeleteAck, EntryCreate, EntryPage, EntryRead, EntryUpdate

# Every route below sits behind the auth gate.
router = APIRouter(prefix="/films", tags=["films"], dependencies=[Depends(require_subject)])


@router.get("", response_model=EntryPage)
def list_entries(
    page: Optional[str] = Query(None, description="1-based page; anything non-numeric or < 1 means 1"),
    svc: CatalogService = Depends(get_catalog_service),
) -> EntryPage:
    return to_page_schema(svc.list_entries(page))


@router.get("/{entry_id}", response_model=EntryRead)
def get_entry(
    entry_id: int = Path(...),
    svc: CatalogService = Depends(get_catalog_service),
) -> EntryRead:
    return to_read_schema(svc.get_entry(entry_id))


@router.post("", response_model=EntryRead, status_code=HTTPStatus.CREATED)
def create_entry(
    payload: EntryCreate,
    svc: CatalogService = Depends(get_catalog_service),
) -> EntryRead:
    return to_read_schema(svc.create_entry(payload.model_dump()))


@router.put("/{entry_id}", response_model=EntryRead)
def update_entry(
    entry_id: int,
    payload: EntryUpdate,
    svc: CatalogService = Depends(get_catalog_service),
) -> EntryRead:
    return to_read_schema(svc.update_entry(entry_id, payload.changes()))


@router.delete("/{entry_id}", response_model=DeleteAck)
def delete_entry(
    entry_id: int,
    svc: CatalogService = Depends(get_catalog_service),
) -> DeleteAck:
    svc.delete_entry(entry_id)
    return DeleteAck()
