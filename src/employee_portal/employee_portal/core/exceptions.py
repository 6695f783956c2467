class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when the requested record does not exist."""


class ConflictError(DomainError):
    """Raised when a unique value (email, employee id) is already taken."""
