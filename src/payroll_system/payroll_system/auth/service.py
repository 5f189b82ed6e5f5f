from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, ValidationError
from .credentials import CredentialVerifier
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate a user (login) and read back token claims."""

    def __init__(self, verifier: CredentialVerifier, tokens: TokenService):
        self._verifier = verifier
        self._tokens = tokens

    def login(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        errors: list[dict] = []
        values: dict[str, str] = {}
        for field in ("username", "password"):
            try:
                values[field] = require_non_empty(payload.get(field), field)
            except ValidationError as e:
                errors.extend(e.errors)
        if errors:
            raise ValidationError("Invalid login request", errors=errors)

        principal = self._verifier.verify(values["username"], values["password"])
        if principal is None:
            logger.info("Failed login for %r", values["username"])
            raise AuthenticationError("Invalid username or password")

        return {"token": self._tokens.issue(principal), "user": principal.to_dict()}

    def current_user(self, authorization: Optional[str]) -> Dict[str, Any]:
        return self._tokens.decode(extract_bearer(authorization))


def extract_bearer(auth_header: Optional[str]) -> Optional[str]:
    if not auth_header:
        return None
    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]
