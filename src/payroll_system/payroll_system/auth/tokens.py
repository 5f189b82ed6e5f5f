from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import jwt

from ..core.constants import DEFAULT_JWT_EXPIRES_MINUTES, JWT_ALGORITHM
from ..core.exceptions import AuthenticationError
from .credentials import Principal


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issue and verify HS256 bearer tokens carrying {username, role}."""

    def __init__(
        self,
        secret: str,
        *,
        expires_minutes: int = DEFAULT_JWT_EXPIRES_MINUTES,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._expires = timedelta(minutes=int(expires_minutes))
        self._clock = clock or _utcnow

    def issue(self, principal: Principal) -> str:
        now = self._clock()
        payload = {
            "username": principal.username,
            "role": principal.role.value,
            "iat": now,
            "exp": now + self._expires,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def decode(self, token: Optional[str]) -> Dict[str, Any]:
        if not token:
            raise AuthenticationError("Access token is required")
        try:
            return jwt.decode(token, self._secret, algorithms=[JWT_ALGORITHM])
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid or expired token")
