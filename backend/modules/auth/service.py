"""
Authentication service implementation.

Signs users up and in with Google ID tokens and issues session tokens.
"""

import logging
from typing import Awaitable, Callable, Optional

from modules.users.exceptions import DuplicateUserError, UserDataError
from modules.users.models import CreateUserData, UserRecord
from shared.models import AuthenticatedUser

from .interfaces import IAuthService, IIdentityVerifier, ISessionIssuer, IUserDirectory
from .models import AuthOutcome, ProviderClaims
from .exceptions import (
    MissingTokenError,
    ProcessingFailureError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

# Directory errors whose message starts with one of these are processing
# failures; anything else is propagated unclassified.
PROCESSING_FAILURE_SIGNATURES = (
    "Failed to process user",
    "Failed to create user",
    "Invalid user data",
)

LogoutHook = Callable[[Optional[AuthenticatedUser]], Awaitable[None]]


def is_processing_failure(error: Exception) -> bool:
    """Check whether a directory error is a recognised processing failure."""
    if isinstance(error, UserDataError):
        return True
    return str(error).startswith(PROCESSING_FAILURE_SIGNATURES)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Sign-up and sign-in deliberately disagree on what an existing user
    means: sign-up refuses to reuse an account and sign-in refuses to
    create one.
    """

    def __init__(
        self,
        verifier: IIdentityVerifier,
        directory: IUserDirectory,
        sessions: ISessionIssuer,
        logout_hooks: Optional[list[LogoutHook]] = None,
    ):
        self._verifier = verifier
        self._directory = directory
        self._sessions = sessions
        self._logout_hooks = list(logout_hooks or [])

    async def sign_up_with_google(self, raw_token: Optional[str]) -> AuthOutcome:
        """Verify the token, create the user, and issue a session token."""
        claims = self._verify(raw_token)

        existing = self._lookup(claims)
        if existing is not None:
            raise UserAlreadyExistsError(claims.subject_id)

        try:
            user = self._call_directory(
                self._directory.create,
                CreateUserData(
                    google_id=claims.subject_id,
                    email=claims.email,
                    name=claims.display_name,
                    profile_picture=claims.avatar_url,
                ),
            )
        except DuplicateUserError as e:
            raise UserAlreadyExistsError(claims.subject_id) from e
        logger.info("Signed up user %s", user.id)
        return self._outcome(user)

    async def sign_in_with_google(self, raw_token: Optional[str]) -> AuthOutcome:
        """Verify the token, find the user, and issue a session token."""
        claims = self._verify(raw_token)

        user = self._lookup(claims)
        if user is None:
            raise UserNotFoundError(google_id=claims.subject_id)

        logger.info("Signed in user %s", user.id)
        return self._outcome(user)

    async def logout(self, user: Optional[AuthenticatedUser] = None) -> None:
        """
        Log the user out.

        Sessions are stateless, so there is nothing to invalidate. Logout
        hooks run in order and their errors propagate.
        """
        for hook in self._logout_hooks:
            await hook(user)
        logger.info("Logged out user %s", user.id if user else "<anonymous>")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _verify(self, raw_token: Optional[str]) -> ProviderClaims:
        if not raw_token:
            raise MissingTokenError("Google token is required")
        return self._verifier.verify(raw_token)

    def _lookup(self, claims: ProviderClaims) -> Optional[UserRecord]:
        return self._call_directory(self._directory.find_by_google_id, claims.subject_id)

    def _call_directory(self, operation, *args):
        try:
            return operation(*args)
        except Exception as e:
            if is_processing_failure(e):
                raise ProcessingFailureError(str(e)) from e
            raise

    def _outcome(self, user: UserRecord) -> AuthOutcome:
        token = self._sessions.issue(user.id)
        return AuthOutcome(token=token, user=user)
