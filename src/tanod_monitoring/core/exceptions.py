class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when no valid principal is available."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class StoreUnavailable(DomainError):
    """Raised when the backing store cannot serve a read or write."""
