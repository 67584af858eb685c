"""
Base exception classes for the BioTrack backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class BioTrackError(Exception):
    """
    Base exception for all BioTrack errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(BioTrackError):
    """Resource not found."""

    pass


class ValidationError(BioTrackError):
    """Input validation failed."""

    pass


class ConflictError(BioTrackError):
    """Resource already exists or conflicts with current state."""

    pass


class AuthenticationError(BioTrackError):
    """Authentication failed (invalid or missing credentials)."""

    pass

