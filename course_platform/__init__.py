"""
course_platform package initializer.

`manager` is not imported here: it depends on the sibling `auth` package,
which itself reads `course_platform.config`.
"""

from . import errors
from . import storage

__all__ = ["errors", "storage"]
