"""
Exception taxonomy for Course Platform.

Managers and the auth service raise these; `main.create_app()` registers
one exception handler per class that turns them into HTTP responses:

    ValidationFailed  -> 400 {"errors": [...]}
    AuthDenied        -> 401 {"message": "Access Denied"}
    ResourceNotFound  -> 400 {"message": "Course not found"}

Anything else is an internal error and becomes an opaque 500.
"""

from typing import List, Optional

__all__ = [
    "CoursePlatformError",
    "ValidationFailed",
    "EmailInUse",
    "AuthDenied",
    "ResourceNotFound",
]


class CoursePlatformError(Exception):
    """Base class for errors that map to a client-facing response."""


class ValidationFailed(CoursePlatformError):
    """Submitted payload is missing one or more required fields."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class EmailInUse(ValidationFailed):
    """Signup used an email address that already belongs to a user."""

    def __init__(self, email_address: str):
        super().__init__([f'The email address "{email_address}" is already in use'])
        self.email_address = email_address


class AuthDenied(CoursePlatformError):
    """
    Credentials were missing, unknown, or wrong.

    The reason is kept for server-side logging only; the HTTP response is
    identical for every reason.
    """

    def __init__(self, reason: Optional[str] = None):
        super().__init__(reason or "Access Denied")
        self.reason = reason


class ResourceNotFound(CoursePlatformError):
    """Course does not exist or does not belong to the caller."""

    def __init__(self, message: str = "Course not found"):
        super().__init__(message)
        self.message = message
