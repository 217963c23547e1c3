class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules (BadRequest)."""


class AuthorizationError(DomainError):
    """Raised when the caller may not perform an action (Forbidden)."""


class NotFoundError(DomainError):
    """Raised when a referenced entity cannot be resolved."""


class ConflictError(DomainError):
    """Raised when a write collides with a unique key held by another record."""


class StoreReadError(DomainError):
    """Raised when the data store fails during a read; the caller may retry."""
