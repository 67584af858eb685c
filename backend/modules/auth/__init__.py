"""
Authentication module.

Handles Google sign-up/sign-in, session token issuing, and the request
authentication gate.

Public API:
- IAuthService: Interface for auth operations
- AuthService: Sign-up, sign-in and logout orchestration
- GoogleIdentityVerifier: Google ID token verification
- SessionIssuer: Session token signing and verification
- AuthGate, AuthGateConfig: Request authentication
- Auth exceptions: MissingTokenError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService, IIdentityVerifier, ISessionIssuer, IUserDirectory
from .models import ProviderClaims, SessionPayload, AuthOutcome
from .exceptions import (
    MissingTokenError,
    InvalidTokenError,
    ExpiredTokenError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ProcessingFailureError,
    SessionConfigurationError,
)
from .google import GoogleIdentityVerifier
from .session import SessionIssuer, SESSION_TTL
from .service import AuthService
from .gate import AuthGate, AuthGateConfig

__all__ = [
    # Interfaces
    "IAuthService",
    "IIdentityVerifier",
    "ISessionIssuer",
    "IUserDirectory",
    # Implementations
    "AuthService",
    "GoogleIdentityVerifier",
    "SessionIssuer",
    "SESSION_TTL",
    "AuthGate",
    "AuthGateConfig",
    # Models
    "ProviderClaims",
    "SessionPayload",
    "AuthOutcome",
    # Exceptions
    "MissingTokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "ProcessingFailureError",
    "SessionConfigurationError",
]
