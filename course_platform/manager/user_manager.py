"""
UserManager module for Course Platform.

Responsibilities:
    - Validate signup payloads (all four fields, every violation reported)
    - Hash the submitted password before it reaches storage
    - Reject duplicate email addresses

Design notes:
    - The password is always hashed; validation guarantees it is present,
      so there is no "missing password" branch to special-case.
    - Storage decides uniqueness (`create_user` returns None on collision),
      which keeps the check race-free on the SQL backend.
"""

import logging
from typing import Any, Mapping

from auth.utils import hash_password

from ..errors import EmailInUse
from ..storage.base import BaseStorage, Record
from .validation import USER_FIELDS, ensure_valid

log = logging.getLogger("course_platform.manager")


class UserManager:
    """Coordinates signup rules for users."""

    def __init__(self, storage: BaseStorage):
        self.storage = storage

    def register(self, payload: Mapping[str, Any]) -> Record:
        """
        Create a user from a camelCase signup payload.

        Args:
            payload (Mapping[str, Any]): Keys firstName, lastName, emailAddress, password.

        Returns:
            Record: The stored user (password field holds the hash).

        Raises:
            ValidationFailed: One message per missing field.
            EmailInUse: The email address is already registered.
        """
        ensure_valid(payload, USER_FIELDS)

        user = self.storage.create_user(
            first_name=payload["firstName"],
            last_name=payload["lastName"],
            email_address=payload["emailAddress"],
            password=hash_password(payload["password"]),
        )
        if user is None:
            log.warning("Signup rejected, email already in use: %s", payload["emailAddress"])
            raise EmailInUse(payload["emailAddress"])

        log.info("Created user %s (%s)", user["id"], user["email_address"])
        return user
