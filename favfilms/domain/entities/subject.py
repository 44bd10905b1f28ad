# favfilms/domain/entities/subject.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime


@dataclass(frozen=True)
class TokenSubject:
    """
    Identity carried inside a verified token. Framework-free; the auth gate
    attaches one of these to each request it lets through.
    """
    user_id: str
    name: str
    email: str
    issued_at: datetime

    def __post_init__(self):
        if not self.user_id or not str(self.user_id).strip():
            raise ValueError("TokenSubject.user_id is required")
        if not self.email or not self.email.strip():
            raise ValueError("TokenSubject.email is required")

    def as_dict(self):
        return asdict(self)
