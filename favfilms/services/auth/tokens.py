# favfilms/services/auth/tokens.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Mapping, Optional, Protocol

from jose import JWTError, jwt

from favfilms.domain.entities.subject import TokenSubject
from favfilms.domain.errors import Expired, InvalidSignature, Malformed

Clock = Callable[[], datetime]


class _UserLike(Protocol):
    id: Any
    name: str
    email: str


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Issues and verifies signed, time-bounded identity tokens (JWT).

    Tokens are stateless: nothing is stored server-side and there is no
    revocation. A token is valid iff its signature verifies against the
    secret AND now < iat + lifetime. The lifetime is this service's fixed
    setting, not read back from the token's own `exp` claim.
    """

    REQUIRED_CLAIMS = ("sub", "name", "email", "iat")

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(days=1),
        clock: Optional[Clock] = None,
    ) -> None:
        if not secret:
            raise ValueError("TokenService requires a signing secret")
        if lifetime <= timedelta(0):
            raise ValueError("TokenService lifetime must be positive")
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime
        self.clock: Clock = clock or utcnow

    @classmethod
    def from_settings(cls, cfg, clock: Optional[Clock] = None) -> "TokenService":
        return cls(
            cfg.jwt_secret,
            algorithm=cfg.jwt_algo,
            lifetime=timedelta(minutes=cfg.token_ttl_minutes),
            clock=clock,
        )

    @property
    def lifetime_seconds(self) -> int:
        return int(self.lifetime.total_seconds())

    def _now_ts(self) -> int:
        return int(self.clock().timestamp())

    def issue(self, user: _UserLike) -> str:
        """Sign a token for `user`. Deterministic for a fixed clock and secret."""
        iat = self._now_ts()
        claims = {
            "sub": str(user.id),
            "name": user.name,
            "email": user.email,
            "iat": iat,
            "exp": iat + self.lifetime_seconds,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenSubject:
        claims = self._parse(token)
        try:
            jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                # expiry is checked below against the injected clock
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise InvalidSignature(str(e)) from e

        iat = claims["iat"]
        if self._now_ts() >= iat + self.lifetime_seconds:
            raise Expired()

        return TokenSubject(
            user_id=claims["sub"],
            name=claims["name"],
            email=claims["email"],
            issued_at=datetime.fromtimestamp(iat, tz=timezone.utc),
        )

    def _parse(self, token: str) -> Mapping[str, Any]:
        if not isinstance(token, str) or not token.strip():
            raise Malformed()
        try:
            claims = jwt.get_unverified_claims(token)
        except JWTError as e:
            raise Malformed(str(e)) from e

        missing = [c for c in self.REQUIRED_CLAIMS if c not in claims]
        if missing:
            raise Malformed(f"Token is missing claims: {', '.join(missing)}")
        if not isinstance(claims["sub"], str) or not claims["sub"]:
            raise Malformed("Token subject must be a non-empty string")
        if not isinstance(claims["email"], str) or not claims["email"]:
            raise Malformed("Token email must be a non-empty string")
        if not isinstance(claims["name"], str):
            raise Malformed("Token name must be a string")
        iat = claims["iat"]
        if isinstance(iat, bool) or not isinstance(iat, int):
            raise Malformed("Token iat must be an integer timestamp")
        return claims


def decode_unverified(token: Optional[str]) -> Optional[dict]:
    """
    Read a token's payload WITHOUT checking its signature or expiry.
    Display only; never use the result for an access decision.
    """
    if not token:
        return None
    try:
        return dict(jwt.get_unverified_claims(token))
    except JWTError:
        return None
