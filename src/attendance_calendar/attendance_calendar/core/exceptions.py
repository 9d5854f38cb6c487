class DomainError(Exception):
    """Base exception for attendance calendar errors."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a requested employee does not exist in the roster."""
