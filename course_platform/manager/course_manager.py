"""
CourseManager module for Course Platform.

Responsibilities:
    - List courses (everything, or only the caller's)
    - Read a single course, hiding other owners' courses from signed-in callers
    - Create, update and delete courses on behalf of their owner

Design notes:
    - Callers are already authenticated when they reach this layer; the API
      validates payloads and credentials first, in that order.
    - Every mutation goes through `find_owned_course`. A course owned by
      someone else is reported exactly like a missing one (ResourceNotFound).
    - Payloads use the wire's camelCase keys. On update, optional fields
      that are absent from the payload keep their stored value; fields sent
      as null are cleared.

LLM Prompt Example:
    "Show how a thin service layer keeps ownership rules in one place so
    every route that mutates a resource applies them identically."
"""

import logging
from typing import Any, List, Mapping, Optional

from ..errors import ResourceNotFound
from ..storage.base import BaseStorage, Record
from .ownership import find_owned_course, lookup_course

log = logging.getLogger("course_platform.manager")


class CourseManager:
    """Coordinates read and mutation rules for courses."""

    def __init__(self, storage: BaseStorage):
        self.storage = storage

    # ---------------------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------------------
    def _owned_or_raise(self, user: Record, course_id: int) -> Record:
        found, course = find_owned_course(self.storage, user["id"], course_id)
        if not found:
            log.info("Course %s not found for user %s", course_id, user["id"])
            raise ResourceNotFound()
        return course

    # ---------------------------------------------------------------------
    # Reads
    # ---------------------------------------------------------------------
    def list_courses(self, user: Optional[Record] = None) -> List[Record]:
        """
        Return every course, or only `user`'s courses when a user is given.
        """
        if user is None:
            return self.storage.list_courses()
        return self.storage.find_courses_by_user(user["id"])

    def get_course(self, course_id: int, user: Optional[Record] = None) -> Record:
        """
        Fetch one course.

        Args:
            course_id (int): Course primary key.
            user (Optional[Record]): Signed-in caller, if any.

        Returns:
            Record: The course.

        Raises:
            ResourceNotFound: Unknown id, or a signed-in caller who is not the owner.
        """
        if user is not None:
            return self._owned_or_raise(user, course_id)

        course = lookup_course(self.storage, course_id)
        if course is None:
            raise ResourceNotFound()
        return course

    # ---------------------------------------------------------------------
    # Mutations
    # ---------------------------------------------------------------------
    def create_course(self, user: Record, payload: Mapping[str, Any]) -> Record:
        """Create a course owned by `user` from a validated payload."""
        course = self.storage.create_course(
            user_id=user["id"],
            title=payload["title"],
            description=payload["description"],
            estimated_time=payload.get("estimatedTime"),
            materials_needed=payload.get("materialsNeeded"),
        )
        log.info("User %s created course %s", user["id"], course["id"])
        return course

    def update_course(self, user: Record, course_id: int, payload: Mapping[str, Any]) -> Record:
        """
        Overwrite a course the caller owns.

        Returns:
            Record: The course as stored after the update.

        Raises:
            ResourceNotFound: Unknown id or not owned by `user`.
        """
        course = self._owned_or_raise(user, course_id)

        estimated_time = payload.get("estimatedTime", course["estimated_time"])
        materials_needed = payload.get("materialsNeeded", course["materials_needed"])

        if not self.storage.update_course(
            course_id,
            title=payload["title"],
            description=payload["description"],
            estimated_time=estimated_time,
            materials_needed=materials_needed,
        ):
            # Deleted between the ownership check and the write
            raise ResourceNotFound()

        log.info("User %s updated course %s", user["id"], course_id)
        return {
            **course,
            "title": payload["title"],
            "description": payload["description"],
            "estimated_time": estimated_time,
            "materials_needed": materials_needed,
        }

    def delete_course(self, user: Record, course_id: int) -> None:
        """
        Delete a course the caller owns.

        Raises:
            ResourceNotFound: Unknown id, already deleted, or not owned by `user`.
        """
        self._owned_or_raise(user, course_id)
        if not self.storage.delete_course(course_id):
            raise ResourceNotFound()
        log.info("User %s deleted course %s", user["id"], course_id)
