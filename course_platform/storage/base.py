"""
Base storage interface for Course Platform.

Purpose:
    Define a small, stable contract that multiple storage backends
    (in-memory, PostgreSQL) can implement without requiring changes to
    the managers or the API layer.

Record shape:
    Records cross this boundary as plain dicts with snake_case keys.

        user   = {"id", "first_name", "last_name", "email_address", "password"}
        course = {"id", "user_id", "title", "description",
                  "estimated_time", "materials_needed"}

    `password` always holds a bcrypt hash, never the submitted secret.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover` so coverage tools don't
    penalize the project for un-runnable abstract declarations.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]


class BaseStorage(ABC):
    """Abstract base class for storage backends."""

    # ---- Users -------------------------------------------------------------

    @abstractmethod  # pragma: no cover
    def find_users_by_email(self, email_address: str) -> List[Record]:
        """
        Return every user whose email matches exactly (case-sensitive).

        Returns:
            List[Record]: Matching users ordered by id; empty if none.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def find_user_by_id(self, user_id: int) -> Optional[Record]:
        """Return a user by primary key or None."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def create_user(
        self,
        first_name: str,
        last_name: str,
        email_address: str,
        password: str,
    ) -> Optional[Record]:
        """
        Insert a user. `password` must already be hashed.

        Returns:
            Optional[Record]: The stored user, or None if the email is taken.

        LLM Prompt Example:
            "Show how a UNIQUE constraint plus ON CONFLICT DO NOTHING lets the
            database decide email uniqueness without a racy read-then-write."
        """
        raise NotImplementedError

    # ---- Courses -----------------------------------------------------------

    @abstractmethod  # pragma: no cover
    def list_courses(self) -> List[Record]:
        """Return all courses ordered by id."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def find_courses_by_user(self, user_id: int) -> List[Record]:
        """Return the courses owned by `user_id`, ordered by id."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def find_course_by_id(self, course_id: int) -> Optional[Record]:
        """
        Return a course by primary key or None.

        LLM Prompt Example:
            "Explain why a primary-key lookup followed by an owner comparison
            beats scanning every course a user owns."
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def create_course(
        self,
        user_id: int,
        title: str,
        description: str,
        estimated_time: Optional[str] = None,
        materials_needed: Optional[str] = None,
    ) -> Record:
        """Insert a course owned by `user_id` and return the stored record."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def update_course(
        self,
        course_id: int,
        title: str,
        description: str,
        estimated_time: Optional[str] = None,
        materials_needed: Optional[str] = None,
    ) -> bool:
        """
        Overwrite the editable fields of a course. Ownership is not changed.

        Returns:
            bool: False if the course does not exist.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def delete_course(self, course_id: int) -> bool:
        """
        Remove a course.

        Returns:
            bool: False if the course does not exist.
        """
        raise NotImplementedError
