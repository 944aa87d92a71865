from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class HashingError(DomainError):
    """Raised when the password hashing primitive is unavailable."""


class PersistenceError(DomainError):
    """Raised when the store fails to complete a write."""


class DuplicateRecordError(PersistenceError):
    """Raised by a store when a unique key rejects a write."""

    def __init__(self, field: str, message: str = ""):
        super().__init__(message or f"Duplicate value for {field}")
        self.field = field


class RegistrationCommitError(PersistenceError):
    """Raised when company and admin employee could not be committed together.

    The transaction is rolled back, so no orphaned company is left behind.
    """
