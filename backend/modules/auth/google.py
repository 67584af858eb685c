"""
Google ID token verifier.

Verifies ID tokens issued by Google Sign-In against Google's published
signing keys and extracts the identity claims needed to provision or
look up a user.
"""

import logging
from typing import Any, Optional

import jwt
from jwt import PyJWKClient
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidTokenError
from .models import ProviderClaims

logger = logging.getLogger(__name__)

GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")
INVALID_GOOGLE_TOKEN = "Invalid Google token"


class GoogleIdentityVerifier:
    """
    Verifies Google-issued ID tokens using Google's JWKS.

    Google ID token structure:
    - Header: alg (RS256), kid (key ID)
    - Payload: sub, email, name, picture, iss, aud (client ID), exp, iat

    Every call performs a single verification against the provider. Only
    the signing keys are cached (by PyJWKClient); verification results
    are never cached.

    Usage:
        verifier = GoogleIdentityVerifier(client_id="...apps.googleusercontent.com")
        claims = verifier.verify(id_token)
    """

    def __init__(
        self,
        client_id: str,
        jwks_url: str = "https://www.googleapis.com/oauth2/v3/certs",
        jwks_client: Optional[PyJWKClient] = None,
    ):
        self._client_id = client_id
        self._jwks_client = jwks_client or PyJWKClient(jwks_url, cache_keys=True)

    def verify(self, raw_token: str) -> ProviderClaims:
        """
        Verify a Google ID token and return its identity claims.

        Raises:
            InvalidTokenError: If Google's signature check fails, the token is
                malformed or expired, the signing keys cannot be fetched, or
                any of sub, email and name is missing.
        """
        try:
            signing_key = self._jwks_client.get_signing_key_from_jwt(raw_token)
            payload = jwt.decode(
                raw_token,
                signing_key.key,
                algorithms=["RS256"],
                audience=self._client_id,
                options={"require": ["sub", "exp", "iat", "iss", "aud"]},
            )
        except (jwt.PyJWTError, ValueError) as e:
            logger.info("Google token verification failed: %s", e)
            raise InvalidTokenError(INVALID_GOOGLE_TOKEN) from e

        if payload.get("iss") not in GOOGLE_ISSUERS:
            raise InvalidTokenError(INVALID_GOOGLE_TOKEN)

        return claims_from_payload(payload)


def claims_from_payload(payload: Optional[dict[str, Any]]) -> ProviderClaims:
    """
    Build ProviderClaims from a decoded Google payload.

    Partial payloads are rejected outright; nothing is defaulted.
    """
    if not payload:
        raise InvalidTokenError(INVALID_GOOGLE_TOKEN)

    try:
        return ProviderClaims(
            subject_id=payload.get("sub"),
            email=payload.get("email"),
            display_name=payload.get("name"),
            avatar_url=payload.get("picture") or None,
        )
    except PydanticValidationError as e:
        raise InvalidTokenError(INVALID_GOOGLE_TOKEN) from e
