"""
Session token authentication middleware.

Wraps the auth gate in FastAPI dependencies for protected routes.
"""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    UserNotFoundError,
)
from modules.auth.gate import AuthGate
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_gate

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)

# (error, message) pairs returned for each gate rejection
GATE_REJECTIONS: dict[type[Exception], tuple[str, str]] = {
    MissingTokenError: ("Access denied", "No token provided"),
    InvalidTokenError: ("Invalid token", "Token is malformed or expired"),
    ExpiredTokenError: ("Token expired", "Please login again"),
    UserNotFoundError: ("User not found", "Token is valid but user no longer exists"),
}


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, error: str, message: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": error, "message": message},
            headers={"WWW-Authenticate": "Bearer"},
        )


def _authorization_value(
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    if credentials is None:
        return None
    return f"{credentials.scheme} {credentials.credentials}"


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    gate: AuthGate = Depends(get_auth_gate),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    try:
        return gate.authenticate(_authorization_value(credentials))
    except (AuthenticationError, UserNotFoundError) as e:
        error, message = GATE_REJECTIONS.get(type(e), ("Invalid token", e.message))
        raise AuthError(error, message)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    gate: AuthGate = Depends(get_auth_gate),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Use this for endpoints that work with or without authentication.
    """
    if credentials is None and not gate.config.bypass_enabled:
        return None

    try:
        return gate.authenticate(_authorization_value(credentials))
    except (AuthenticationError, UserNotFoundError):
        return None
