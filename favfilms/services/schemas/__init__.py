from favfilms.services.schemas.entries import (
    EntryCreate,
    EntryUpdate,
    EntryRead,
    EntryPage,
    DeleteAck,
)
from favfilms.services.schemas.auth import (
    SignupRequest,
    LoginRequest,
    UserRead,
    AuthResponse,
    SubjectRead,
)
__all__ = [
    "EntryCreate",
    "EntryUpdate",
    "EntryRead",
    "EntryPage",
    "DeleteAck",
    "SignupRequest",
    "LoginRequest",
    "UserRead",
    "AuthResponse",
    "SubjectRead",
]
