"""Errors raised by the auth service, each mapped to an HTTP status."""

from fastapi import status


class AuthServiceError(Exception):
    """Base error rendered as ``{"success": false, "message": ...}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthServiceError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(AuthServiceError):
    """The normalized email is already registered."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Email already registered. Please use a different email or login."


class AuthError(AuthServiceError):
    """Credentials could not be verified."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication failed"


class AccountNotFoundError(AuthError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "No account found with this email"


class IncorrectPasswordError(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Incorrect password. Please try again."


class DatabaseConnectionError(AuthServiceError):
    """The store is unreachable, rejected the credentials, or the pool is exhausted."""

    default_message = "Database connection error"


class PersistenceError(AuthServiceError):
    """A write to the store failed."""

    default_message = "Unable to save user"
