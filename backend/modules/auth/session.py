"""
Session token issuing and verification.

Session tokens are stateless HS256 JWTs carrying the internal user id.
Nothing is stored server-side: a token is valid while its signature
checks out and it has not expired.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from .exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    SessionConfigurationError,
)
from .models import SessionPayload

SESSION_TTL = timedelta(hours=19)
SESSION_ALGORITHM = "HS256"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionIssuer:
    """
    Signs and verifies session tokens with a process-wide secret.

    The secret is read-only after construction, so one instance can be
    shared across concurrent requests.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = SESSION_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    def issue(self, user_id: str) -> str:
        """Sign a session token for the given user id."""
        self._require_secret()
        issued_at = self._clock()
        payload = {
            "id": user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=SESSION_ALGORITHM)

    def decode(self, token: Optional[str]) -> SessionPayload:
        """
        Verify a session token and return its payload.

        Raises:
            MissingTokenError: If token is empty or None
            ExpiredTokenError: If the signature is good but the token expired
            InvalidTokenError: For any other signature, shape or claim problem
        """
        if not token:
            raise MissingTokenError()
        self._require_secret()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[SESSION_ALGORITHM],
                options={"require": ["id", "iat", "exp"]},
            )
            return SessionPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")
        except (PydanticValidationError, TypeError) as e:
            raise InvalidTokenError(f"Invalid token payload: {e}")

    def verify(self, token: Optional[str]) -> str:
        """Verify a session token and return the internal user id."""
        return self.decode(token).id

    def _require_secret(self) -> None:
        if not self._secret:
            raise SessionConfigurationError()
