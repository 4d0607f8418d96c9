class DomainError(Exception):
    """Base exception for business rule violations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when a payload is malformed or a field violates its format."""


class AuthenticationError(DomainError):
    """Raised when no user matches the supplied credentials."""


class AuthorizationError(DomainError):
    """Raised when an authenticated user lacks the required role."""


class ConflictError(DomainError):
    """Raised on a uniqueness violation or an enrollment already signed."""


class NotFoundError(DomainError):
    """Raised when a referenced user, course or enrollment does not exist."""


class StoreError(Exception):
    """Raised when the backing medium cannot be read or written."""
