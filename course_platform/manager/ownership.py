"""
Ownership checks for courses.

A course belongs to exactly one user (`course["user_id"]`). Lookups go
through the course primary key and then compare owners, so the cost does
not grow with the number of courses a user has.
"""

from typing import Optional, Tuple

from ..storage.base import BaseStorage, Record

# Ids are SERIAL (int4) in PostgreSQL
MAX_COURSE_ID = 2_147_483_647


def lookup_course(storage: BaseStorage, course_id: int) -> Optional[Record]:
    """Fetch a course by id; ids outside [1, MAX_COURSE_ID] cannot exist."""
    if not 1 <= course_id <= MAX_COURSE_ID:
        return None
    return storage.find_course_by_id(course_id)


def find_owned_course(
    storage: BaseStorage, user_id: int, course_id: int
) -> Tuple[bool, Optional[Record]]:
    """
    Resolve `course_id` only if `user_id` owns it.

    Args:
        storage (BaseStorage): Backend to query.
        user_id (int): Authenticated user's id.
        course_id (int): Requested course id.

    Returns:
        Tuple[bool, Optional[Record]]: `(True, course)` when the course exists
        and belongs to the user; `(False, None)` for an unknown id, a course
        owned by someone else, or an empty store.

    LLM Prompt Example:
        "Explain why answering 'not found' for someone else's resource hides
        which ids exist, compared to answering 'forbidden'."
    """
    course = lookup_course(storage, course_id)
    if course is None or course["user_id"] != user_id:
        return False, None
    return True, course
