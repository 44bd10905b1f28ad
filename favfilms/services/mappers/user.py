# favfilms/services/mappers/user.py
from __future__ import annotations

from favfilms.domain.entities.subject import TokenSubject
from favfilms.services.schemas.auth import AuthResponse, SubjectRead, UserRead


def to_user_read(user) -> UserRead:
    return UserRead(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=getattr(user, "date_created", None),
    )


def to_auth_response(token: str, user) -> AuthResponse:
    return AuthResponse(token=token, user=to_user_read(user))


def to_subject_read(subject: TokenSubject) -> SubjectRead:
    return SubjectRead(
        id=subject.user_id,
        name=subject.name,
        email=subject.email,
        issued_at=subject.issued_at,
    )
