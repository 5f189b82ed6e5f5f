from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import Role


@dataclass(frozen=True)
class Principal:
    """Authenticated identity placed into issued tokens."""

    username: str
    role: Role

    def to_dict(self) -> dict:
        return {"username": self.username, "role": self.role.value}


class CredentialVerifier(Protocol):
    def verify(self, username: str, password: str) -> Optional[Principal]:
        raise NotImplementedError


class SingleUserCredentialVerifier(CredentialVerifier):
    """One configured administrator account.

    A users table can replace this later by implementing ``verify``.
    """

    def __init__(self, username: str, password: str, *, role: Role = Role.ADMIN):
        self._username = username
        self._password_hash = generate_password_hash(password)
        self._role = role

    def verify(self, username: str, password: str) -> Optional[Principal]:
        if username != self._username:
            return None
        if not check_password_hash(self._password_hash, password):
            return None
        return Principal(username=self._username, role=self._role)
