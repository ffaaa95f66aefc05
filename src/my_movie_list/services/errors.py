"""Error kinds raised by the watchlist services.

These carry no transport details; the HTTP layer decides how each kind is
reported.
"""


class ServiceError(Exception):
    """Base exception for service-level failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(ServiceError):
    """Raised when input is malformed or missing."""


class NotFoundError(ServiceError):
    """Raised when a referenced user, watchlist or comment does not exist."""


class ForbiddenError(ServiceError):
    """Raised when the caller lacks the required role or relationship."""


class ConflictError(ServiceError):
    """Raised when an operation would duplicate existing state."""


class DataIntegrityError(ServiceError):
    """Raised when a stored record violates an expected invariant."""


class AuthenticationError(ServiceError):
    """Raised when login credentials do not match a user."""
