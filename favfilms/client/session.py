# favfilms/client/session.py
from __future__ import annotations

from typing import Optional

from favfilms.services.auth.tokens import decode_unverified


class SessionCache:
    """
    Holds at most one token for this client process.

    `get_current_user()` only decodes the payload for display; it is not a
    security check, the server stays the sole verifier. `logout()` is local:
    there is no server-side revocation.
    """

    def __init__(self, token: Optional[str] = None) -> None:
        self._token: Optional[str] = token or None

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def store(self, token: Optional[str]) -> None:
        self._token = token or None

    def get_current_user(self) -> Optional[dict]:
        return decode_unverified(self._token)

    def logout(self) -> None:
        self._token = None

    def auth_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"} if self._token else {}
