"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from settings.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.gate import AuthGate
    from modules.auth.interfaces import (
        IAuthService,
        IIdentityVerifier,
        ISessionIssuer,
        IUserDirectory,
    )


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._sessions: "ISessionIssuer | None" = None
        self._verifier: "IIdentityVerifier | None" = None
        self._users: "IUserDirectory | None" = None
        self._auth_service: "IAuthService | None" = None
        self._auth_gate: "AuthGate | None" = None

    @property
    def sessions(self) -> "ISessionIssuer":
        """Get the session issuer instance."""
        if self._sessions is None:
            from modules.auth.session import SessionIssuer
            from shared.config import get_settings
            self._sessions = SessionIssuer(get_settings().jwt_secret)
        return self._sessions

    @property
    def verifier(self) -> "IIdentityVerifier":
        """Get the Google identity verifier instance."""
        if self._verifier is None:
            from modules.auth.google import GoogleIdentityVerifier
            from shared.config import get_settings
            settings = get_settings()
            self._verifier = GoogleIdentityVerifier(
                client_id=settings.google_client_id,
                jwks_url=settings.google_jwks_url,
            )
        return self._verifier

    @property
    def users(self) -> "IUserDirectory":
        """Get the user repository instance."""
        if self._users is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._users = UserRepository(get_supabase_client())
        return self._users

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                verifier=self.verifier,
                directory=self.users,
                sessions=self.sessions,
            )
        return self._auth_service

    @property
    def gate(self) -> "AuthGate":
        """Get the request authentication gate."""
        if self._auth_gate is None:
            from modules.auth.gate import AuthGate, AuthGateConfig
            from shared.config import get_settings
            self._auth_gate = AuthGate(
                sessions=self.sessions,
                directory=self.users,
                config=AuthGateConfig.from_settings(get_settings()),
            )
        return self._auth_gate

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._sessions = None
        self._verifier = None
        self._users = None
        self._auth_service = None
        self._auth_gate = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_auth_gate() -> "AuthGate":
    """FastAPI dependency for the auth gate."""
    return get_container().gate
