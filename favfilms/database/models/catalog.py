# favfilms/database/models/catalog.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import Enum as SAEnum, Float, Integer, String, Text, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column

from favfilms.database.core.main import Base
from favfilms.database.core.service_object import ServiceObject
from favfilms.domain.enums import EntryType


class CatalogEntry(ServiceObject, Base):
    """
    One film or TV show in the shared catalog. Not owned by any user.
    """
    __tablename__ = "favfilms"
    __table_args__ = (
        CheckConstraint("length(title) > 0", name="title_not_empty"),
        Index("ix_favfilms_title", "title"),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[EntryType] = mapped_column(
        SAEnum(
            EntryType,
            name="entry_type",
            native_enum=False,
            length=16,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )
    director: Mapped[str] = mapped_column(String(255), nullable=False)
    budget: Mapped[float] = mapped_column(Float, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    duration: Mapped[str] = mapped_column(String(64), nullable=False)
    year_or_time: Mapped[int] = mapped_column(Integer, nullable=False)
    genre: Mapped[Optional[str]] = mapped_column(String(64))
    rating: Mapped[Optional[float]] = mapped_column(Float)
    description: Mapped[Optional[str]] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<CatalogEntry id={self.id} title={self.title!r} type={self.type}>"
