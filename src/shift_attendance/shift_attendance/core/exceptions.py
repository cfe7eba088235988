class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    status_code = 403


class NotFoundError(DomainError):
    """Raised when the target of an action does not exist (anymore)."""

    status_code = 404


class ShiftNotFoundError(NotFoundError):
    """Raised when a worker has no assigned shift."""


class AlreadyCheckedInError(ValidationError):
    pass


class TooEarlyError(ValidationError):
    pass


class TooLateError(ValidationError):
    pass


class NoActiveSessionError(ValidationError):
    pass


class DatabaseError(Exception):
    """Wraps any persistence-layer failure."""

    status_code = 500
