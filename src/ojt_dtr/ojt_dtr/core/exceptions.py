class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidConfiguration(ValidationError):
    """Raised when a student's hour targets cannot be used for computation."""


class NotFoundError(DomainError):
    """Raised when a referenced student does not exist."""
