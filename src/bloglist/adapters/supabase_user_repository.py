"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from bloglist.domain.errors import ConflictError
from bloglist.domain.models import UserRecord
from bloglist.services.users import UserRepository

_COLUMNS = "id, name, username, password_hash"
_UNIQUE_VIOLATION = "23505"
_NIL_UUID = "00000000-0000-0000-0000-000000000000"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, name: str, username: str, password_hash: str) -> UserRecord:
        """Insert a user row and return it."""
        try:
            response = (
                self.client.table("users")
                .insert(
                    {
                        "name": name,
                        "username": username,
                        "password_hash": password_hash,
                    }
                )
                .execute()
            )
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise ConflictError("username must be unique") from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by registration time."""
        response = (
            self.client.table("users").select(_COLUMNS).order("created_at").execute()
        )
        return [_parse_user(row) for row in response.data or []]

    def clear(self) -> None:
        """Delete every user row."""
        self.client.table("users").delete().neq("id", _NIL_UUID).execute()


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        username=str(row["username"]),
        password_hash=str(row["password_hash"]),
    )
