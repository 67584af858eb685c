"""
Tests for shared models.
"""

import pytest
from pydantic import ValidationError

from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser model in shared."""

    def test_create_with_required_fields(self):
        """Should create user with only required fields."""
        user = AuthenticatedUser(
            id="user-123",
            email="test@example.com",
            name="Test User",
        )
        assert user.id == "user-123"
        assert user.email == "test@example.com"
        assert user.username is None
        assert user.profile_picture is None

    def test_user_is_immutable(self):
        """AuthenticatedUser should be immutable."""
        user = AuthenticatedUser(id="user-123", email="test@example.com", name="Test")
        with pytest.raises(ValidationError):
            user.id = "different-id"

    def test_ignores_extra_fields(self):
        """Should ignore fields it does not know about."""
        user = AuthenticatedUser(
            id="user-123",
            email="test@example.com",
            name="Test",
            google_id="g-1",
        )
        assert not hasattr(user, "google_id")

    def test_email_validation(self):
        """Should validate email format."""
        with pytest.raises(ValidationError):
            AuthenticatedUser(
                id="user-123",
                email="not-an-email",
                name="Test",
            )
