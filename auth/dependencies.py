"""
FastAPI dependencies for authentication.

`get_credentials` is used in routes with Depends(); it never raises, so a
route can validate its payload before deciding whether the caller is
authenticated. The route then hands the credentials to an `Authenticator`.
"""

import base64
import binascii
import logging
from typing import Optional

from fastapi import Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param

from course_platform.storage.base import BaseStorage, Record

from .config import AUTH_REALM
from .service import authenticate_user

log = logging.getLogger("course_platform.auth")


def parse_basic_credentials(authorization: Optional[str]) -> Optional[HTTPBasicCredentials]:
    """
    Decode a Basic `Authorization` header value.

    Credentials are decoded as UTF-8, so non-ASCII emails and passwords
    round-trip.

    Returns:
        Optional[HTTPBasicCredentials]: None for an absent, non-Basic or
        malformed header (bad base64, invalid UTF-8, no colon).
    """
    scheme, param = get_authorization_scheme_param(authorization)
    if not (authorization and scheme and param) or scheme.lower() != "basic":
        return None

    try:
        data = base64.b64decode(param, validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        log.warning("Malformed Authorization header: credentials are not valid base64 UTF-8")
        return None

    username, separator, password = data.partition(":")
    if not separator:
        log.warning("Malformed Authorization header: no ':' between username and password")
        return None
    return HTTPBasicCredentials(username=username, password=password)


class OptionalHTTPBasic(HTTPBasic):
    """HTTP Basic scheme that yields None instead of raising."""

    async def __call__(self, request: Request) -> Optional[HTTPBasicCredentials]:
        return parse_basic_credentials(request.headers.get("Authorization"))


# HTTP Basic authentication scheme (still documented in OpenAPI)
get_credentials = OptionalHTTPBasic(realm=AUTH_REALM, auto_error=False)


class Authenticator:
    """
    Resolves the current user from Basic-auth credentials.

    Args:
        storage (BaseStorage): User store to authenticate against.
    """

    def __init__(self, storage: BaseStorage):
        self.storage = storage

    def require(self, credentials: Optional[HTTPBasicCredentials]) -> Record:
        """
        Return the authenticated user.

        Raises:
            AuthDenied: Missing header, unknown email, or wrong password.
        """
        if credentials is None:
            return authenticate_user(self.storage, None, None)
        return authenticate_user(self.storage, credentials.username, credentials.password)

    def optional(self, credentials: Optional[HTTPBasicCredentials]) -> Optional[Record]:
        """
        Return None for anonymous callers, otherwise behave like `require`.
        """
        if credentials is None:
            return None
        return self.require(credentials)
