from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[Department]:
        raise NotImplementedError

    def exists(self, code: str) -> bool:
        raise NotImplementedError

    def create(self, department: Department) -> None:
        raise NotImplementedError

    def update(self, department: Department) -> bool:
        """Return False when no row has ``department.code``."""

        raise NotImplementedError

    def delete(self, code: str) -> bool:
        raise NotImplementedError
