import pytest
from pydantic import ValidationError

from modules.auth.models import (
    AuthenticateUserRequest,
    AuthOutcome,
    ProviderClaims,
    SessionPayload,
)

from conftest import make_user


class TestProviderClaims:
    def test_create_claims(self):
        claims = ProviderClaims(subject_id="g-1", email="a@x.com", display_name="A")
        assert claims.subject_id == "g-1"
        assert claims.avatar_url is None

    def test_claims_are_immutable(self):
        claims = ProviderClaims(subject_id="g-1", email="a@x.com", display_name="A")
        with pytest.raises(ValidationError):
            claims.email = "b@x.com"

    @pytest.mark.parametrize("field", ["subject_id", "email", "display_name"])
    def test_empty_required_field(self, field):
        data = {"subject_id": "g-1", "email": "a@x.com", "display_name": "A", field: ""}
        with pytest.raises(ValidationError):
            ProviderClaims(**data)


class TestSessionPayload:
    def test_parse_payload(self):
        payload = SessionPayload(id="user-1", iat=1704063600, exp=1704132000)
        assert payload.id == "user-1"

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            SessionPayload(id="", iat=0, exp=1)


class TestAuthenticateUserRequest:
    def test_accepts_camel_case_alias(self):
        request = AuthenticateUserRequest.model_validate({"idToken": "abc"})
        assert request.id_token == "abc"

    def test_token_optional(self):
        assert AuthenticateUserRequest.model_validate({}).id_token is None


class TestAuthOutcome:
    def test_serialises_user(self):
        outcome = AuthOutcome(token="signed", user=make_user())
        data = outcome.model_dump()
        assert data["token"] == "signed"
        assert data["user"]["google_id"] == "g-1"
