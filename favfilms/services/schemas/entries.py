# favfilms/services/schemas/entries.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from favfilms.domain.enums import EntryType

# Fields every stored entry must carry; they may be omitted on update but never nulled.
REQUIRED_ENTRY_FIELDS = ("title", "type", "director", "budget", "location", "duration", "year_or_time")


class EntryCreate(BaseModel):
    """
    Body of POST /films. Unknown keys (id, createdAt, ...) are ignored.
    """
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str = Field(..., min_length=1, max_length=255)
    type: EntryType
    director: str = Field(..., min_length=1, max_length=255)
    budget: float = Field(..., ge=0)
    location: str = Field(..., min_length=1, max_length=255)
    duration: str = Field(..., min_length=1, max_length=64, description='Free-form, e.g. "120 min" or "5 seasons"')
    year_or_time: int = Field(..., ge=1800, le=9999, description="Year produced")
    genre: Optional[str] = Field(default=None, max_length=64)
    rating: Optional[float] = Field(default=None, ge=0, le=10)
    description: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, v):
        return EntryType.parse(v)


class EntryUpdate(BaseModel):
    """
    Body of PUT /films/{id}. Partial: only the keys that are present change.
    Optional fields (genre, rating, description) can be cleared with null.
    """
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    type: Optional[EntryType] = None
    director: Optional[str] = Field(default=None, min_length=1, max_length=255)
    budget: Optional[float] = Field(default=None, ge=0)
    location: Optional[str] = Field(default=None, min_length=1, max_length=255)
    duration: Optional[str] = Field(default=None, min_length=1, max_length=64)
    year_or_time: Optional[int] = Field(default=None, ge=1800, le=9999)
    genre: Optional[str] = Field(default=None, max_length=64)
    rating: Optional[float] = Field(default=None, ge=0, le=10)
    description: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, v):
        return None if v is None else EntryType.parse(v)

    @model_validator(mode="after")
    def _no_null_required(self):
        nulled = [f for f in REQUIRED_ENTRY_FIELDS if f in self.model_fields_set and getattr(self, f) is None]
        if nulled:
            raise ValueError(f"cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class EntryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    type: EntryType
    director: str
    budget: float
    location: str
    duration: str
    year_or_time: int
    genre: Optional[str] = None
    rating: Optional[float] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class EntryPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: List[EntryRead] = []
    has_more: bool = Field(..., alias="hasMore")
    page: int
    page_size: int = Field(..., alias="pageSize")
    total: int


class DeleteAck(BaseModel):
    success: bool = True
    message: str = "Entry deleted"
