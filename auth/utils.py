"""
Utility functions for the auth module.
"""

import bcrypt

from .config import BCRYPT_ROUNDS


def hash_password(password: str) -> str:
    """
    Return a salted bcrypt hash of the given password.

    Note:
        bcrypt only considers the first 72 bytes of the password; longer
        inputs are truncated before hashing so current bcrypt releases
        do not reject them.
    """
    secret = password.encode("utf-8")[:72]
    return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("ascii")


def verify_password(password: str, hashed: str) -> bool:
    """
    Constant-time check of `password` against a stored bcrypt hash.

    Returns False instead of raising when the stored value is not a valid hash.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8")[:72], hashed.encode("ascii"))
    except (ValueError, UnicodeEncodeError):
        return False
