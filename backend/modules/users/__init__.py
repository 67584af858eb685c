"""
Users module.

Owns persistence of user records keyed by Google subject id.

Public API:
- UserRepository: Supabase-backed user directory
- UserRecord, CreateUserData: User models
- UserDataError: Raised when user data cannot be processed
- DuplicateUserError: Raised when a user with the same Google id already exists
"""

from .models import UserRecord, CreateUserData
from .exceptions import DuplicateUserError, UserDataError
from .repository import UserRepository

__all__ = [
    "UserRecord",
    "CreateUserData",
    "UserDataError",
    "DuplicateUserError",
    "UserRepository",
]
