"""
Authentication endpoints.

Thin controller over the auth service: sign-up, sign-in and logout with
Google ID tokens. Maps auth errors to HTTP responses; anything it does
not recognise is left to the application's generic error handler.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from modules.auth.exceptions import (
    InvalidTokenError,
    MissingTokenError,
    ProcessingFailureError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from modules.auth.interfaces import IAuthService
from modules.auth.models import AuthenticateUserRequest, AuthResponse, MessageResponse
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service
from ..middleware.auth import get_optional_user

router = APIRouter()

# Status code and client-facing message for each auth error
ERROR_RESPONSES: dict[type[Exception], tuple[int, str]] = {
    MissingTokenError: (status.HTTP_400_BAD_REQUEST, "Google token is required"),
    InvalidTokenError: (status.HTTP_401_UNAUTHORIZED, "Invalid Google token"),
    UserAlreadyExistsError: (
        status.HTTP_409_CONFLICT,
        "User already exists, please sign in instead.",
    ),
    UserNotFoundError: (status.HTTP_404_NOT_FOUND, "User not found, please sign up first."),
    ProcessingFailureError: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Failed to process user information",
    ),
}


def error_response(error: Exception) -> Optional[JSONResponse]:
    """Build the response for a known auth error, or None if unrecognised."""
    for cls in type(error).__mro__:
        mapped = ERROR_RESPONSES.get(cls)
        if mapped is not None:
            status_code, message = mapped
            return JSONResponse(status_code=status_code, content={"message": message})
    return None


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {}, 401: {}, 409: {}, 500: {}},
)
async def sign_up(
    request: Optional[AuthenticateUserRequest] = Body(None),
    service: IAuthService = Depends(get_auth_service),
):
    """
    Register a new user with a Google ID token.

    Returns a session token and the created user.
    """
    try:
        outcome = await service.sign_up_with_google(request.id_token if request else None)
    except tuple(ERROR_RESPONSES) as e:
        return error_response(e)
    return AuthResponse(message="User signed up successfully", data=outcome)


@router.post(
    "/signin",
    response_model=AuthResponse,
    responses={400: {}, 401: {}, 404: {}, 500: {}},
)
async def sign_in(
    request: Optional[AuthenticateUserRequest] = Body(None),
    service: IAuthService = Depends(get_auth_service),
):
    """
    Sign in an existing user with a Google ID token.

    Returns a session token and the user's record.
    """
    try:
        outcome = await service.sign_in_with_google(request.id_token if request else None)
    except tuple(ERROR_RESPONSES) as e:
        return error_response(e)
    return AuthResponse(message="User signed in successfully", data=outcome)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IAuthService = Depends(get_auth_service),
) -> MessageResponse:
    """
    Log out.

    Session tokens are stateless, so this always succeeds unless a
    logout side effect fails.
    """
    await service.logout(user)
    return MessageResponse(message="User logged out successfully")
