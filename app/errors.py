"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
VALIDATION_ERROR = "VALIDATION_ERROR"
FORBIDDEN = "FORBIDDEN"
UNAUTHORIZED = "UNAUTHORIZED"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a referenced resource does not exist or was not supplied."""

    pass


class DuplicateResourceError(DomainError):
    """Raised when attempting to create or update a resource that would violate a uniqueness constraint."""

    pass


class DomainValidationError(DomainError):
    """Raised when required input is missing or malformed (e.g. actor without identity, user without email)."""

    pass


class ForbiddenError(DomainError):
    """Raised when the current user may not perform an operation that is not modeled as a gated result."""

    pass


class UnauthorizedError(DomainError):
    """Raised when credentials are missing or do not match."""

    pass
