"""JWT issuing and verification for bearer authentication."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import JWTError, jwt

from app.core.config import Settings
from app.schemas import TokenData


class InvalidTokenError(Exception):
    """Raised when a bearer token is malformed, tampered with or expired."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """Signs and verifies access tokens carrying the user id and email."""

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        expire_minutes: int = 60 * 24 * 7,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_delta = timedelta(minutes=expire_minutes)
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            settings.secret_key,
            algorithm=settings.algorithm,
            expire_minutes=settings.access_token_expire_minutes,
        )

    def issue(self, user_id: str, email: str, expires_delta: Optional[timedelta] = None) -> str:
        issued_at = self._clock()
        payload = {
            "sub": user_id,
            "email": email,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self._expire_delta),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenData:
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc

        user_id = payload.get("sub")
        email = payload.get("email")
        if not user_id or not email:
            raise InvalidTokenError("token is missing identity claims")
        return TokenData(user_id=user_id, email=email)


__all__ = ["InvalidTokenError", "TokenIssuer"]
