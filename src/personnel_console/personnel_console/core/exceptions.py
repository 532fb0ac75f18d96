from __future__ import annotations

from typing import Mapping, Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` maps a field name to its messages so callers can show them next to the input.
    """

    def __init__(self, message: str, errors: Optional[Mapping[str, Sequence[str]]] = None):
        super().__init__(message)
        self.errors = {k: list(v) for k, v in (errors or {}).items()}


class NotFoundError(DomainError):
    """Raised when a write refers to an entity that does not exist."""


class ExternalServiceFailure(DomainError):
    """Raised when the text generator is unreachable or returned unusable output."""

    retryable = True


class InvariantViolation(DomainError):
    """Raised when stored data breaks a structural rule. Indicates a programming defect."""
