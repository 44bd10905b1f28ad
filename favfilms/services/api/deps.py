# favfilms/services/api/deps.py
from __future__ import annotations

from typing import Generator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from favfilms.common.settings import Settings
from favfilms.database.core.main import Database
from favfilms.database.repos.catalog_repo import SqlAlchemyCatalogRepo
from favfilms.database.repos.user_repo import SqlAlchemyUserRepo
from favfilms.domain.entities.subject import TokenSubject
from favfilms.services.auth.gate import AuthGate
from favfilms.services.auth.service import AuthService
from favfilms.services.auth.tokens import TokenService
from favfilms.services.catalog.service import CatalogService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_db(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    db = database.session()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """One transaction per request: commit on success, rollback if the handler raises."""
    with db.begin():
        yield db


def get_auth_gate(tokens: TokenService = Depends(get_token_service)) -> AuthGate:
    return AuthGate(tokens)


def require_subject(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    gate: AuthGate = Depends(get_auth_gate),
) -> TokenSubject:
    """
    Auth gate as a dependency. Put it on the router (`dependencies=[...]`) so it
    resolves before any session is opened or handler runs.
    """
    subject = gate.authenticate(authorization)
    request.state.subject = subject
    return subject


def get_catalog_service(
    session: Session = Depends(transactional_session),
    cfg: Settings = Depends(get_app_settings),
) -> CatalogService:
    return CatalogService(SqlAlchemyCatalogRepo(session), page_size=cfg.catalog.page_size)


def get_auth_service(
    session: Session = Depends(transactional_session),
    tokens: TokenService = Depends(get_token_service),
    cfg: Settings = Depends(get_app_settings),
) -> AuthService:
    return AuthService(SqlAlchemyUserRepo(session), tokens, bcrypt_rounds=cfg.bcrypt_rounds)
