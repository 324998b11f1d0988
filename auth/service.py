"""
Core authentication logic.

This module validates Basic-auth credentials against the user store.
It distinguishes four outcomes for logging purposes, but callers turn every
failure into the same 401 response so clients cannot tell an unknown email
from a wrong password.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from course_platform.errors import AuthDenied
from course_platform.storage.base import BaseStorage, Record

from .utils import verify_password

log = logging.getLogger("course_platform.auth")


class AuthOutcome(enum.Enum):
    AUTHENTICATED = "authenticated"
    WRONG_PASSWORD = "wrong_password"
    NO_SUCH_USER = "no_such_user"
    MISSING_HEADER = "missing_header"


@dataclass(frozen=True)
class AuthResult:
    outcome: AuthOutcome
    user: Optional[Record] = None

    @property
    def ok(self) -> bool:
        return self.outcome is AuthOutcome.AUTHENTICATED


def verify_credentials(
    storage: BaseStorage, username: Optional[str], password: Optional[str]
) -> AuthResult:
    """
    Authenticate a user by email address and password.

    Args:
        storage (BaseStorage): Where users are looked up.
        username (Optional[str]): Email address from the Basic-auth header,
            or None when no usable header was sent.
        password (Optional[str]): Password from the Basic-auth header.

    Returns:
        AuthResult: The outcome, plus the user record when authenticated.

    Notes:
        - Email match is exact and case-sensitive; the first match wins.
        - Logs one line per outcome (INFO on success, WARNING otherwise).
    """
    if username is None:
        log.warning("Auth header not found")
        return AuthResult(AuthOutcome.MISSING_HEADER)

    users = storage.find_users_by_email(username)
    if not users:
        log.warning("User not found for username: %s", username)
        return AuthResult(AuthOutcome.NO_SUCH_USER)

    user = users[0]
    if not verify_password(password or "", user["password"]):
        log.warning(
            "Authentication failure for username: %s %s", user["first_name"], user["last_name"]
        )
        return AuthResult(AuthOutcome.WRONG_PASSWORD)

    log.info("Authentication successful for username: %s %s", user["first_name"], user["last_name"])
    return AuthResult(AuthOutcome.AUTHENTICATED, user)


def authenticate_user(
    storage: BaseStorage, username: Optional[str], password: Optional[str]
) -> Record:
    """
    Like `verify_credentials`, but raise on any failure.

    Returns:
        Record: The authenticated user.

    Raises:
        AuthDenied: For every failure outcome; the reason is for logs only.
    """
    result = verify_credentials(storage, username, password)
    if not result.ok:
        raise AuthDenied(result.outcome.value)
    return result.user
