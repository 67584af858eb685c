"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    BioTrackError,
    AuthenticationError,
    ConflictError,
    NotFoundError,
)


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when a token fails verification or carries incomplete claims."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a well-formed session token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class UserAlreadyExistsError(ConflictError):
    """Raised on sign-up when the Google account is already registered."""

    def __init__(self, google_id: str):
        super().__init__(
            "User already exists",
            code="USER_ALREADY_EXISTS",
            details={"google_id": google_id},
        )


class UserNotFoundError(NotFoundError):
    """Raised when no user record matches the authenticated identity."""

    def __init__(self, message: str = "User not found", **details: str):
        super().__init__(message, code="USER_NOT_FOUND", details=dict(details))


class ProcessingFailureError(BioTrackError):
    """Raised when the user directory reports a recognised processing failure."""

    def __init__(self, message: str = "Failed to process user"):
        super().__init__(message, code="PROCESSING_FAILURE")


class SessionConfigurationError(BioTrackError):
    """Raised when session tokens cannot be signed or checked (no secret)."""

    def __init__(self, message: str = "Session signing secret is not configured"):
        super().__init__(message, code="SESSION_NOT_CONFIGURED")
