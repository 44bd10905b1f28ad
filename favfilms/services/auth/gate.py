# favfilms/services/auth/gate.py
from __future__ import annotations

from typing import Optional

from favfilms.common.logging import get_logger
from favfilms.domain.entities.subject import TokenSubject
from favfilms.domain.errors import AuthError, MissingCredential, Unauthorized
from favfilms.services.auth.tokens import TokenService

logger = get_logger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer(authorization: Optional[str]) -> str:
    """
    Pull the token out of an `Authorization: Bearer <token>` header value.
    Raises MissingCredential if the header is absent or not in that shape.
    """
    raw = (authorization or "").strip()
    if not raw:
        raise MissingCredential()
    scheme, _, token = raw.partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token or " " in token:
        raise MissingCredential()
    return token


class AuthGate:
    """
    Pure request filter: same header value and clock always give the same
    verdict. Never reads or writes the credential store.
    """

    def __init__(self, tokens: TokenService) -> None:
        self.tokens = tokens

    def authenticate(self, authorization: Optional[str]) -> TokenSubject:
        try:
            token = extract_bearer(authorization)
        except MissingCredential:
            logger.info("Rejected request: no bearer token")
            raise
        try:
            return self.tokens.verify(token)
        except AuthError as e:
            logger.info("Rejected request: %s (%s)", e.__class__.__name__, e.message)
            raise Unauthorized() from e
