"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated by the auth gate once a session token has been verified
    and made available to route handlers via dependency injection.
    """

    id: str = Field(..., description="Internal user ID")
    email: EmailStr = Field(..., description="User's email address")
    name: str = Field(..., description="Display name")
    username: Optional[str] = Field(None, description="Public username")
    profile_picture: Optional[str] = Field(None, description="Avatar URL")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
