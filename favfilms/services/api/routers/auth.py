# favfilms/services/api/routers/auth.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends

from favfilms.domain.entities.subject import TokenSubject
from favfilms.services.api.deps import get_auth_service, require_subject
from favfilms.services.auth.service import AuthService
from favfilms.services.mappers.user import to_auth_response, to_subject_read
from favfilms.services.schemas import AuthResponse, LoginRequest, SignupRequest, SubjectRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=HTTPStatus.CREATED)
def signup(payload: SignupRequest, svc: AuthService = Depends(get_auth_service)) -> AuthResponse:
    token, user = svc.signup(name=payload.name, email=payload.email, password=payload.password)
    return to_auth_response(token, user)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, svc: AuthService = Depends(get_auth_service)) -> AuthResponse:
    token, user = svc.login(email=payload.email, password=payload.password)
    return to_auth_response(token, user)


@router.get("/me", response_model=SubjectRead)
def me(subject: TokenSubject = Depends(require_subject)) -> SubjectRead:
    """Identity from the verified token; does not hit the database."""
    return to_subject_read(subject)
