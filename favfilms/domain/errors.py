# favfilms/domain/errors.py
from __future__ import annotations


class FavFilmsError(Exception):
    """Base for every error the API translates into a response."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message or self.__class__.__name__


# ---- authentication ----

class AuthError(FavFilmsError):
    pass


class MissingCredential(AuthError):
    def __init__(self, message: str = "No token provided") -> None:
        super().__init__(message)


class InvalidSignature(AuthError):
    def __init__(self, message: str = "Token signature does not verify") -> None:
        super().__init__(message)


class Expired(AuthError):
    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(message)


class Malformed(AuthError):
    def __init__(self, message: str = "Token is malformed") -> None:
        super().__init__(message)


class Unauthorized(AuthError):
    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class InvalidCredentials(AuthError):
    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


# ---- catalog / storage ----

class NotFound(FavFilmsError):
    pass


class ValidationError(FavFilmsError):
    def __init__(self, message: str = "Invalid request", details: list | None = None) -> None:
        super().__init__(message)
        self.details = details or []


class Conflict(FavFilmsError):
    pass


class StorageError(FavFilmsError):
    pass
