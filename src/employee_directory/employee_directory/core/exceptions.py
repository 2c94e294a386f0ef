class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class AuthenticationError(DomainError):
    """Raised when credentials or access tokens are missing, invalid or expired."""


class StorageError(DomainError):
    """Raised when object storage refuses or fails an operation."""
