"""User registration and lookup."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from werkzeug.security import generate_password_hash

from bloglist.domain.errors import ConflictError, ValidationError
from bloglist.domain.models import UserRecord

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def create_user(self, name: str, username: str, password_hash: str) -> UserRecord:
        """Create and return a new user, raising ConflictError on a taken username."""

    def list_users(self) -> list[UserRecord]:
        """Return all users in registration order."""

    def clear(self) -> None:
        """Remove every user."""


@dataclass
class UserService:
    """Application service for the account store."""

    repository: UserRepository
    min_credential_length: int = 3

    def register(self, name: str, username: str, password: str) -> UserRecord:
        """Register a new user and return it."""
        name = (name or "").strip()
        username = (username or "").strip()
        if not name or not username or not (password or "").strip():
            raise ValidationError("name, username and password are required")
        if len(username) < self.min_credential_length:
            raise ValidationError(
                f"username must be at least {self.min_credential_length} characters"
            )
        if len(password) < self.min_credential_length:
            raise ValidationError(
                f"password must be at least {self.min_credential_length} characters"
            )
        if self.repository.get_by_username(username) is not None:
            raise ConflictError("username must be unique")

        user = self.repository.create_user(
            name=name,
            username=username,
            password_hash=generate_password_hash(password),
        )
        _logger.info("Registered user: username=%s id=%s", user.username, user.id)
        return user

    def find_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""
        return self.repository.get_by_username(username)

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        return self.repository.get_by_id(user_id)

    def list_users(self) -> list[UserRecord]:
        """Return all registered users."""
        return self.repository.list_users()
