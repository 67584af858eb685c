"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
"""

import re
from typing import Optional, Any

from postgrest.exceptions import APIError
from pydantic import ValidationError as PydanticValidationError

from shared.repository import BaseRepository
from .exceptions import DuplicateUserError, UserDataError
from .models import CreateUserData, UserRecord

_USERNAME_INVALID_CHARS = re.compile(r"[^a-z0-9_]")

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


def username_base_from_email(email: str) -> str:
    """Derive a username candidate from the local part of an email address."""
    local_part = email.split("@")[0].lower()
    return _USERNAME_INVALID_CHARS.sub("_", local_part)


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    Implements the user directory consumed by the auth module:
    lookup by Google subject id, lookup by internal id, and create.
    """

    TABLE = "users"

    def find_by_google_id(self, google_id: str) -> Optional[UserRecord]:
        """
        Get a user by Google subject id.

        Returns:
            UserRecord if found, None otherwise.
        """
        result = self._db.table(self.TABLE).select("*").eq("google_id", google_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        """
        Get a user by internal id.

        Returns:
            UserRecord if found, None otherwise.
        """
        result = self._db.table(self.TABLE).select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def is_username_available(self, username: str) -> bool:
        """Check whether a username is still free."""
        result = self._db.table(self.TABLE).select("id").eq("username", username).execute()
        return not result.data

    def create(self, data: CreateUserData) -> UserRecord:
        """
        Create a new user record.

        A username is generated from the email's local part. If it is taken,
        a numeric suffix is appended (``name_1``, ``name_2``, ...) until a
        free one is found.

        Raises:
            DuplicateUserError: If another insert for the same Google subject
                id won the race.
            UserDataError: If the insert returns no row or the row is invalid.
        """
        base = username_base_from_email(data.email)
        username = base
        suffix = 1
        while not self.is_username_available(username):
            username = f"{base}_{suffix}"
            suffix += 1

        row = {
            "google_id": data.google_id,
            "email": data.email.strip().lower(),
            "name": data.name.strip(),
            "username": username,
            "profile_picture": data.profile_picture,
        }
        try:
            result = self._db.table(self.TABLE).insert(row).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION and "google_id" in f"{e.message} {e.details}":
                raise DuplicateUserError(data.google_id) from e
            raise
        if not result.data:
            raise UserDataError(
                "Failed to create user",
                details={"google_id": data.google_id},
            )
        return self._map_to_user(result.data[0])

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map a database row to a UserRecord."""
        try:
            return UserRecord(
                id=str(data["id"]),
                google_id=data["google_id"],
                email=data["email"],
                name=data["name"],
                username=data["username"],
                profile_picture=data.get("profile_picture"),
                created_at=data.get("created_at"),
                updated_at=data.get("updated_at"),
            )
        except (KeyError, PydanticValidationError) as e:
            raise UserDataError(f"Invalid user data: {e}") from e
