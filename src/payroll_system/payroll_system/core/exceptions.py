from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400

    def __init__(self, message: str, *, errors: Optional[list[dict]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingRequiredFilterError(ValidationError):
    """Raised when a report is requested without a mandatory filter."""


class InvalidMonthFormatError(ValidationError):
    """Raised when a month is not in YYYY-MM form."""


class InvalidReferenceError(DomainError):
    """Raised when a foreign key points at a row that does not exist."""


class DuplicateRecordError(DomainError):
    """Raised when a write would duplicate a unique key."""


class DependentRecordsError(DomainError):
    """Raised when a delete is blocked by rows referencing the target."""


class NotFoundError(DomainError):
    status_code = 404


class AuthenticationError(DomainError):
    """Raised when credentials or bearer tokens are missing or invalid."""

    status_code = 401


class ConflictError(DomainError):
    """Raised when the database rejects a write that passed the service checks."""

    status_code = 409
