"""Service layer: validation, ownership and resource orchestration."""

from .course_manager import CourseManager
from .ownership import find_owned_course
from .user_manager import UserManager
from .validation import COURSE_FIELDS, USER_FIELDS, ensure_valid, validate_required

__all__ = [
    "CourseManager",
    "UserManager",
    "find_owned_course",
    "validate_required",
    "ensure_valid",
    "USER_FIELDS",
    "COURSE_FIELDS",
]
