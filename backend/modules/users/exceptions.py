"""
Users module exceptions.
"""

from typing import Optional, Any

from shared.exceptions import ConflictError, ValidationError


class UserDataError(ValidationError):
    """Raised when a user row cannot be created or mapped."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, code="USER_DATA_ERROR", details=details)


class DuplicateUserError(ConflictError):
    """Raised when an insert collides with an existing user's Google subject id."""

    def __init__(self, google_id: str):
        super().__init__(
            "User already exists",
            code="DUPLICATE_USER",
            details={"google_id": google_id},
        )
