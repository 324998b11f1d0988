"""
Pydantic schemas for request/response models in the auth module.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for signup payload. Fields are optional so missing ones reach the validator."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email_address: Optional[str] = Field(default=None, alias="emailAddress")
    password: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class UserProfile(BaseModel):
    """Schema for GET /users: the authenticated user's public fields."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email_address: str = Field(alias="emailAddress")


class UserOut(UserProfile):
    """Schema for the signup response. Never includes the password hash."""

    id: int
