from __future__ import annotations
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from favfilms.common.strings.splitters import normalize_email
from favfilms.database.models.user import User as DBUser
from favfilms.database.repos._errors import storage_error
from favfilms.domain.errors import Conflict


class SqlAlchemyUserRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def get(self, user_id: int) -> Optional[DBUser]:
        try:
            return self.db.get(DBUser, user_id)
        except SQLAlchemyError as e:
            raise storage_error(e) from e

    def get_by_email(self, email: str) -> Optional[DBUser]:
        stmt = select(DBUser).where(DBUser.email == normalize_email(email)).limit(1)
        try:
            return self.db.execute(stmt).scalars().first()
        except SQLAlchemyError as e:
            raise storage_error(e) from e

    def create(self, *, name: str, email: str, password_hash: str) -> DBUser:
        obj = DBUser(name=name.strip(), email=normalize_email(email), password_hash=password_hash)
        try:
            self.db.add(obj)
            self.db.flush()
        except IntegrityError as e:
            raise Conflict("Email already registered") from e
        except SQLAlchemyError as e:
            raise storage_error(e) from e
        self.db.refresh(obj)
        return obj
