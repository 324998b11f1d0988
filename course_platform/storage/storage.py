"""
Storage module for Course Platform (in-memory implementation).

Responsibilities:
    - Store users and courses with auto-incrementing ids
    - Enforce email uniqueness the way the SQL schema does
    - Provide lookups by email, by id, and by owner

Design:
    - This is an in-memory reference implementation that satisfies the BaseStorage contract.
    - It is intentionally simple to keep unit/integration tests fast and deterministic.
    - Returned records are copies; mutating them never changes stored state.
    - A single lock guards reads and writes; FastAPI runs sync routes in a threadpool.

LLM Prompt Example:
    "Explain how this in-memory storage can be swapped for a PostgreSQL-backed
     layer without changing the manager or API code, by adhering to a narrow,
     explicit BaseStorage interface."
"""

import itertools
import threading
from typing import Dict, List, Optional

from .base import BaseStorage, Record


class Storage(BaseStorage):
    def __init__(self):
        """
        Initialize empty tables.

        Internal schema:
            self.users   = {user_id: {"id", "first_name", "last_name", "email_address", "password"}}
            self.courses = {course_id: {"id", "user_id", "title", "description",
                                        "estimated_time", "materials_needed"}}
        """
        self.users: Dict[int, Record] = {}
        self.courses: Dict[int, Record] = {}
        self._user_ids = itertools.count(1)
        self._course_ids = itertools.count(1)
        self._lock = threading.Lock()

    # ---------------------------------------------------------------------
    # Users
    # ---------------------------------------------------------------------
    def find_users_by_email(self, email_address: str) -> List[Record]:
        with self._lock:
            return [dict(u) for u in self.users.values() if u["email_address"] == email_address]

    def find_user_by_id(self, user_id: int) -> Optional[Record]:
        with self._lock:
            user = self.users.get(user_id)
            return dict(user) if user else None

    def create_user(
        self,
        first_name: str,
        last_name: str,
        email_address: str,
        password: str,
    ) -> Optional[Record]:
        """
        Insert a user unless the email is already registered.

        Returns:
            Optional[Record]: Stored user, or None on an email collision
            (mirrors `UNIQUE(email_address)` in the SQL schema).
        """
        with self._lock:
            if any(u["email_address"] == email_address for u in self.users.values()):
                return None
            user_id = next(self._user_ids)
            self.users[user_id] = {
                "id": user_id,
                "first_name": first_name,
                "last_name": last_name,
                "email_address": email_address,
                "password": password,
            }
            return dict(self.users[user_id])

    # ---------------------------------------------------------------------
    # Courses
    # ---------------------------------------------------------------------
    def list_courses(self) -> List[Record]:
        with self._lock:
            return [dict(self.courses[cid]) for cid in sorted(self.courses)]

    def find_courses_by_user(self, user_id: int) -> List[Record]:
        return [c for c in self.list_courses() if c["user_id"] == user_id]

    def find_course_by_id(self, course_id: int) -> Optional[Record]:
        with self._lock:
            course = self.courses.get(course_id)
            return dict(course) if course else None

    def create_course(
        self,
        user_id: int,
        title: str,
        description: str,
        estimated_time: Optional[str] = None,
        materials_needed: Optional[str] = None,
    ) -> Record:
        with self._lock:
            course_id = next(self._course_ids)
            self.courses[course_id] = {
                "id": course_id,
                "user_id": user_id,
                "title": title,
                "description": description,
                "estimated_time": estimated_time,
                "materials_needed": materials_needed,
            }
            return dict(self.courses[course_id])

    def update_course(
        self,
        course_id: int,
        title: str,
        description: str,
        estimated_time: Optional[str] = None,
        materials_needed: Optional[str] = None,
    ) -> bool:
        """
        Overwrite editable fields in place.

        Returns:
            bool: True if updated, False if the course does not exist.
        """
        with self._lock:
            course = self.courses.get(course_id)
            if course is None:
                return False
            course.update(
                title=title,
                description=description,
                estimated_time=estimated_time,
                materials_needed=materials_needed,
            )
            return True

    def delete_course(self, course_id: int) -> bool:
        with self._lock:
            return self.courses.pop(course_id, None) is not None
