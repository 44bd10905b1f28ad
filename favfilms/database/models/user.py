# favfilms/database/models/user.py
from __future__ import annotations

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from favfilms.database.core.main import Base
from favfilms.database.core.service_object import ServiceObject


class User(ServiceObject, Base):
    """
    Credential record. Email is stored normalized (trimmed, lower-cased)
    and is unique across all users.
    """
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
