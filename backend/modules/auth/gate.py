"""
Request authentication gate.

Decides whether an inbound request carrying an Authorization header
may proceed, and resolves the user it belongs to.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from modules.users.models import UserRecord
from shared.config import Settings
from shared.models import AuthenticatedUser

from .interfaces import ISessionIssuer, IUserDirectory
from .exceptions import MissingTokenError, UserNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthGateConfig:
    """
    Process-wide gate settings.

    The bypass is active only when disable_auth is set AND a test user id
    is configured. A bare disable_auth flag leaves authentication on.
    """

    disable_auth: bool = False
    test_user_id: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthGateConfig":
        return cls(
            disable_auth=settings.disable_auth,
            test_user_id=settings.test_user_id or None,
        )

    @property
    def bypass_enabled(self) -> bool:
        return self.disable_auth and bool(self.test_user_id)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from a ``Bearer <token>`` header value, if any."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def to_authenticated_user(user: UserRecord) -> AuthenticatedUser:
    return AuthenticatedUser(
        id=user.id,
        email=user.email,
        name=user.name,
        username=user.username,
        profile_picture=user.profile_picture,
    )


class AuthGate:
    """
    Validates session tokens on protected routes.

    States:
        no token        -> MissingTokenError
        token present   -> SessionIssuer.verify
            malformed   -> InvalidTokenError
            expired     -> ExpiredTokenError
            valid       -> user loaded and admitted
    """

    def __init__(
        self,
        sessions: ISessionIssuer,
        directory: IUserDirectory,
        config: AuthGateConfig,
    ):
        self._sessions = sessions
        self._directory = directory
        self._config = config

        if config.disable_auth and not config.test_user_id:
            logger.warning(
                "DISABLE_AUTH is set but TEST_USER_ID is not; "
                "authentication stays enabled"
            )

    @property
    def config(self) -> AuthGateConfig:
        return self._config

    def authenticate(self, authorization: Optional[str]) -> AuthenticatedUser:
        """
        Authenticate a request from its Authorization header value.

        Raises:
            MissingTokenError: No bearer token was supplied
            InvalidTokenError: Token is malformed or badly signed
            ExpiredTokenError: Token is well-formed but expired
            UserNotFoundError: Token is valid but the user no longer exists
        """
        if self._config.bypass_enabled:
            logger.warning("Authentication bypassed for test user %s", self._config.test_user_id)
            return self._load_user(self._config.test_user_id)

        token = extract_bearer_token(authorization)
        if token is None:
            raise MissingTokenError("No token provided")

        user_id = self._sessions.verify(token)
        return self._load_user(user_id)

    def _load_user(self, user_id: str) -> AuthenticatedUser:
        user = self._directory.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(
                "Token is valid but user no longer exists",
                user_id=user_id,
            )
        return to_authenticated_user(user)
