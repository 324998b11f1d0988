"""
Pydantic schemas for course request/response bodies.

Request models accept every field as optional so that missing values reach
the required-field validator (which reports them all with friendly labels)
instead of failing FastAPI's own 422 validation.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class CourseIn(BaseModel):
    """Payload for creating or updating a course."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    estimated_time: Optional[str] = Field(default=None, alias="estimatedTime")
    materials_needed: Optional[str] = Field(default=None, alias="materialsNeeded")

    def to_payload(self) -> Dict[str, Any]:
        """camelCase dict of the fields the client actually sent."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class CourseOut(BaseModel):
    """Course as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    user_id: int = Field(alias="userId")
    title: str
    description: str
    estimated_time: Optional[str] = Field(default=None, alias="estimatedTime")
    materials_needed: Optional[str] = Field(default=None, alias="materialsNeeded")

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CourseOut":
        return cls(**record)
