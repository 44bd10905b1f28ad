# favfilms/services/auth/service.py
from __future__ import annotations

from typing import Any, Tuple

from favfilms.common.logging import get_logger
from favfilms.common.strings.splitters import normalize_email
from favfilms.domain.errors import Conflict, InvalidCredentials
from favfilms.domain.ports.credentials import CredentialStorePort
from favfilms.services.auth.passwords import hash_password, verify_password
from favfilms.services.auth.tokens import TokenService

logger = get_logger(__name__)


class AuthService:
    """
    Signup and login on top of the credential store. Both return
    (token, user); the user record is never mutated after creation.
    """

    def __init__(self, users: CredentialStorePort, tokens: TokenService, *, bcrypt_rounds: int = 12) -> None:
        self.users = users
        self.tokens = tokens
        self.bcrypt_rounds = bcrypt_rounds

    def signup(self, *, name: str, email: str, password: str) -> Tuple[str, Any]:
        email = normalize_email(email)
        if self.users.get_by_email(email) is not None:
            raise Conflict("Email already registered")
        user = self.users.create(
            name=name,
            email=email,
            password_hash=hash_password(password, rounds=self.bcrypt_rounds),
        )
        logger.info("New user signed up id=%s", user.id)
        return self.tokens.issue(user), user

    def login(self, *, email: str, password: str) -> Tuple[str, Any]:
        user = self.users.get_by_email(normalize_email(email))
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentials()
        logger.info("User logged in id=%s", user.id)
        return self.tokens.issue(user), user
