# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str,*, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when data is invalid or violates constraints."""


class InvalidRangeError(ValidationError):
    """Raised when a date range ends before it starts."""


class InvalidTypeError(ValidationError):
    """Raised when an enumerated value is outside its allowed set."""


class NotFoundError(DomainError):
    """Raised when an entity is not found."""


class BusinessRuleError(DomainError):
    """Raised when business rules are violated (e.g., booking an inactive resource)."""


class ConcurrencyError(DomainError):
    """Raised when optimistic locking detects a stale update."""


class PersistenceError(DomainError):
    """Raised when a write failed and the whole unit of work was rolled back."""


class ConflictLookupDegraded(DomainError):
    """
    The advisory conflict check failed after the write was committed.
    Carried on the result instead of being raised: conflicts are unknown, not empty.
    """
