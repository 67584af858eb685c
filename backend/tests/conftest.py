"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory fakes for the auth collaborators and session token helpers.
"""

import itertools
from datetime import datetime, timezone, timedelta
from typing import Optional, Union

import jwt  # PyJWT
import pytest

from api.dependencies import reset_container
from modules.auth.exceptions import InvalidTokenError
from modules.auth.models import ProviderClaims
from modules.auth.session import SessionIssuer
from modules.auth.service import AuthService
from modules.users.exceptions import DuplicateUserError
from modules.users.models import CreateUserData, UserRecord


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "user-1",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a session token the way SessionIssuer does.

    Args:
        user_id: Internal user ID to bind the token to
        expired: If True, creates a token that expired an hour ago
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    if expired:
        issued_at = now - timedelta(hours=20)
        expires_at = now - timedelta(hours=1)
    else:
        issued_at = now
        expires_at = now + timedelta(hours=19)

    payload = {
        "id": user_id,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_user(
    user_id: str = "user-1",
    google_id: str = "g-1",
    email: str = "a@x.com",
    name: str = "A",
) -> UserRecord:
    """Build a UserRecord for tests."""
    return UserRecord(
        id=user_id,
        google_id=google_id,
        email=email,
        name=name,
        username=email.split("@")[0],
    )


class InMemoryUserDirectory:
    """User directory backed by a dict, with call tracking."""

    def __init__(self, users: Optional[list[UserRecord]] = None):
        self.users: dict[str, UserRecord] = {u.id: u for u in users or []}
        self.calls: list[str] = []
        self.error: Optional[Exception] = None
        self._ids = itertools.count(1)

    def _maybe_fail(self) -> None:
        if self.error is not None:
            raise self.error

    def find_by_google_id(self, google_id: str) -> Optional[UserRecord]:
        self.calls.append("find_by_google_id")
        self._maybe_fail()
        for user in self.users.values():
            if user.google_id == google_id:
                return user
        return None

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        self.calls.append("find_by_id")
        self._maybe_fail()
        return self.users.get(user_id)

    def create(self, data: CreateUserData) -> UserRecord:
        self.calls.append("create")
        self._maybe_fail()
        user = UserRecord(
            id=f"new-user-{next(self._ids)}",
            google_id=data.google_id,
            email=data.email,
            name=data.name,
            username=data.email.split("@")[0],
            profile_picture=data.profile_picture,
        )
        self.users[user.id] = user
        return user


class RacingUserDirectory(InMemoryUserDirectory):
    """Directory where another request always inserts the user first."""

    def create(self, data: CreateUserData) -> UserRecord:
        self.calls.append("create")
        raise DuplicateUserError(data.google_id)


class FakeIdentityVerifier:
    """Verifier resolving known raw tokens to claims (or errors)."""

    def __init__(self, tokens: Optional[dict[str, Union[ProviderClaims, Exception]]] = None):
        self.tokens = dict(tokens or {})
        self.calls: list[str] = []

    def verify(self, raw_token: str) -> ProviderClaims:
        self.calls.append(raw_token)
        result = self.tokens.get(raw_token)
        if result is None:
            raise InvalidTokenError("Invalid Google token")
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def claims() -> ProviderClaims:
    """Claims for the default test Google account."""
    return ProviderClaims(subject_id="g-1", email="a@x.com", display_name="A")


@pytest.fixture
def verifier(claims: ProviderClaims) -> FakeIdentityVerifier:
    """Verifier that knows the 'valid-new' token."""
    return FakeIdentityVerifier({"valid-new": claims})


@pytest.fixture
def directory() -> InMemoryUserDirectory:
    """Empty in-memory user directory."""
    return InMemoryUserDirectory()


@pytest.fixture
def sessions() -> SessionIssuer:
    """Session issuer with the test secret."""
    return SessionIssuer(TEST_JWT_SECRET)


@pytest.fixture
def auth_service(
    verifier: FakeIdentityVerifier,
    directory: InMemoryUserDirectory,
    sessions: SessionIssuer,
) -> AuthService:
    """AuthService wired to in-memory fakes."""
    return AuthService(verifier=verifier, directory=directory, sessions=sessions)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization headers with a valid session token for user-1."""
    return {"Authorization": f"Bearer {create_test_token()}"}
