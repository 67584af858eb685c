"""
Users module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class CreateUserData(BaseModel):
    """Fields needed to provision a user from verified Google claims."""

    google_id: str = Field(..., min_length=1, description="Google subject id")
    email: str = Field(..., min_length=1, description="Email address")
    name: str = Field(..., min_length=1, description="Display name")
    profile_picture: Optional[str] = Field(None, description="Avatar URL")


class UserRecord(BaseModel):
    """
    A persisted user.

    Created exactly once per Google subject id. The auth module only
    ever reads or creates these records, never updates them.
    """

    id: str = Field(..., description="Internal user ID")
    google_id: str = Field(..., description="Google subject id (unique)")
    email: EmailStr = Field(..., description="Email address")
    name: str = Field(..., description="Display name")
    username: str = Field(..., description="Public username")
    profile_picture: Optional[str] = Field(None, description="Avatar URL")
    created_at: Optional[datetime] = Field(None, description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")
