"""
Configuration for the auth module.

Values come from `course_platform.config.settings`; this module only names
the pieces the auth code needs.
"""

from course_platform.config import settings

# Realm advertised in WWW-Authenticate on every 401
AUTH_REALM: str = settings.AUTH_REALM

# The one body every authentication failure gets
ACCESS_DENIED_MESSAGE: str = "Access Denied"

BCRYPT_ROUNDS: int = settings.BCRYPT_ROUNDS
