"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    BioTrackError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ConflictError,
)


class TestBioTrackError:
    def test_base_error_message(self):
        """BioTrackError should store message."""
        error = BioTrackError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_base_error_default_code(self):
        """BioTrackError should default code to class name."""
        error = BioTrackError("Test error")
        assert error.code == "BioTrackError"

    def test_base_error_custom_code(self):
        """BioTrackError should accept custom code."""
        error = BioTrackError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_base_error_default_details(self):
        """BioTrackError should default details to empty dict."""
        error = BioTrackError("Test error")
        assert error.details == {}

    def test_base_error_custom_details(self):
        """BioTrackError should accept custom details."""
        error = BioTrackError("Test error", details={"key": "value"})
        assert error.details == {"key": "value"}

    def test_base_error_to_dict(self):
        """BioTrackError should convert to dict."""
        error = BioTrackError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"

    def test_base_error_to_dict_minimal(self):
        """BioTrackError.to_dict should work with minimal args."""
        error = BioTrackError("Test error")
        result = error.to_dict()

        assert result["error"] == "BioTrackError"
        assert result["message"] == "Test error"
        assert result["details"] == {}


class TestNotFoundError:
    def test_not_found_error_inherits_base_error(self):
        """NotFoundError should inherit from BioTrackError."""
        error = NotFoundError("Resource not found")
        assert isinstance(error, BioTrackError)

    def test_not_found_error_default_code(self):
        """NotFoundError should default code to class name."""
        error = NotFoundError("Resource not found")
        assert error.code == "NotFoundError"


class TestValidationError:
    def test_validation_error_inherits_base_error(self):
        """ValidationError should inherit from BioTrackError."""
        error = ValidationError("Invalid input")
        assert isinstance(error, BioTrackError)

    def test_validation_error_with_details(self):
        """ValidationError should support field-level details."""
        error = ValidationError(
            "Validation failed",
            details={"fields": {"email": "Invalid format"}}
        )
        assert error.details["fields"]["email"] == "Invalid format"


class TestAuthenticationError:
    def test_authentication_error_inherits_base_error(self):
        """AuthenticationError should inherit from BioTrackError."""
        error = AuthenticationError("Invalid token")
        assert isinstance(error, BioTrackError)


class TestConflictError:
    def test_conflict_error_inherits_base_error(self):
        """ConflictError should inherit from BioTrackError."""
        error = ConflictError("User already exists")
        assert isinstance(error, BioTrackError)

