from __future__ import annotations
from typing import Optional, Protocol, TypeVar

User = TypeVar("User")


class CredentialStorePort(Protocol[User]):
    def get(self, user_id: int) -> Optional[User]: ...
    def get_by_email(self, email: str) -> Optional[User]: ...
    def create(self, *, name: str, email: str, password_hash: str) -> User: ...
