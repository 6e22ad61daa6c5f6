"""
Domain error taxonomy.

Every error carries the HTTP status the API layer renders it with, so the
use cases never import anything from FastAPI.
"""


class DomainError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Missing or malformed input."""

    status_code = 400


class ConflictError(DomainError):
    """Uniqueness violation (student id or email already registered)."""

    status_code = 409


class NotFoundError(DomainError):
    status_code = 404


class ForbiddenError(DomainError):
    """Role, ownership or approval gate failed."""

    status_code = 403


class InvalidCredentialsError(DomainError):
    status_code = 401

    def __init__(self, message: str = "Invalid credentials.") -> None:
        super().__init__(message)


class AccountNotFoundError(InvalidCredentialsError, NotFoundError):
    """Login identifier matches no account.

    Reported exactly like a wrong password so callers cannot discover which
    identifiers are registered.
    """


class BlobDecodeError(DomainError):
    status_code = 400


class BlobWriteError(DomainError):
    status_code = 500
