"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.users.models import UserRecord


class ProviderClaims(BaseModel):
    """
    Verified identity claims extracted from a Google ID token.

    All of subject_id, email and display_name must be present and
    non-empty; a claim set missing any of them is rejected as a whole.
    """

    subject_id: str = Field(..., description="Google subject id (sub)")
    email: str = Field(..., description="Email address")
    display_name: str = Field(..., description="Display name (name)")
    avatar_url: Optional[str] = Field(None, description="Avatar URL (picture)")

    model_config = {"frozen": True}

    @field_validator("subject_id", "email", "display_name")
    @classmethod
    def _require_non_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value


class SessionPayload(BaseModel):
    """Claims carried inside a session token."""

    id: str = Field(..., min_length=1, description="Internal user ID")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class AuthOutcome(BaseModel):
    """Result of a successful sign-up or sign-in."""

    token: str = Field(..., description="Signed session token")
    user: UserRecord = Field(..., description="The authenticated user")


class AuthenticateUserRequest(BaseModel):
    """Request body for sign-up and sign-in."""

    model_config = ConfigDict(populate_by_name=True)

    id_token: Optional[str] = Field(
        None,
        alias="idToken",
        description="Google ID token obtained by the client",
    )


class AuthResponse(BaseModel):
    """Response body for sign-up and sign-in."""

    message: str
    data: AuthOutcome


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str
