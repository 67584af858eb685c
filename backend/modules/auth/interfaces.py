"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. Collaborators of AuthService are protocols too, so
tests can hand in fakes at construction instead of patching modules.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.users.models import CreateUserData, UserRecord
from shared.models import AuthenticatedUser

from .models import AuthOutcome, ProviderClaims


@runtime_checkable
class IIdentityVerifier(Protocol):
    """Verifies a client-supplied identity provider token."""

    def verify(self, raw_token: str) -> ProviderClaims:
        """
        Verify the token with the provider and return its claims.

        Raises:
            InvalidTokenError: If verification fails or claims are incomplete
        """
        ...


@runtime_checkable
class IUserDirectory(Protocol):
    """Persistence of user records keyed by provider subject id."""

    def find_by_google_id(self, google_id: str) -> Optional[UserRecord]:
        ...

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        ...

    def create(self, data: CreateUserData) -> UserRecord:
        """Create a user. Raises DuplicateUserError if the Google id is taken."""
        ...


@runtime_checkable
class ISessionIssuer(Protocol):
    """Signs and checks time-bounded session tokens."""

    def issue(self, user_id: str) -> str:
        """Sign a session token bound to the given internal user id."""
        ...

    def verify(self, token: Optional[str]) -> str:
        """
        Verify a session token and return the user id it is bound to.

        Raises:
            MissingTokenError: If no token is given
            InvalidTokenError: If the token is malformed or badly signed
            ExpiredTokenError: If the token is well-formed but expired
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def sign_up_with_google(self, raw_token: Optional[str]) -> AuthOutcome:
        """
        Register a new user from a Google ID token.

        Raises:
            MissingTokenError: If no token is given
            InvalidTokenError: If Google rejects the token
            UserAlreadyExistsError: If the Google account is already registered
            ProcessingFailureError: If the directory reports a processing failure
        """
        ...

    async def sign_in_with_google(self, raw_token: Optional[str]) -> AuthOutcome:
        """
        Sign in an existing user with a Google ID token.

        Raises:
            MissingTokenError: If no token is given
            InvalidTokenError: If Google rejects the token
            UserNotFoundError: If the Google account has not signed up
            ProcessingFailureError: If the directory reports a processing failure
        """
        ...

    async def logout(self, user: Optional[AuthenticatedUser] = None) -> None:
        """End the client's session. Sessions are stateless, so nothing is revoked."""
        ...
