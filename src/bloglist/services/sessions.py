"""Login sessions backed by opaque bearer tokens."""

import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from werkzeug.security import check_password_hash, generate_password_hash

from bloglist.domain.errors import AuthError
from bloglist.domain.models import SessionRecord, UserRecord
from bloglist.services.users import UserRepository

_logger = logging.getLogger(__name__)

WRONG_CREDENTIALS = "wrong username or password"

# Checked against when the username is unknown so both failure paths hash.
_DUMMY_HASH = generate_password_hash(secrets.token_urlsafe(16))


class SessionRepository(Protocol):
    """Storage for live sessions."""

    def add(self, session: SessionRecord) -> None:
        """Store a new session."""

    def get(self, token: str) -> SessionRecord | None:
        """Return a session by token, if present."""

    def remove(self, token: str) -> None:
        """Remove a session; unknown tokens are ignored."""

    def clear(self) -> None:
        """Remove every session."""


@dataclass
class SessionService:
    """Authenticates users and resolves session tokens."""

    user_repository: UserRepository
    session_repository: SessionRepository
    token_bytes: int = 32

    def login(self, username: str, password: str) -> tuple[SessionRecord, UserRecord]:
        """Check credentials and open a new session."""
        user = self.user_repository.get_by_username((username or "").strip())
        if user is None:
            check_password_hash(_DUMMY_HASH, password or "")
            _logger.warning("Login failed: username=%s", username)
            raise AuthError(WRONG_CREDENTIALS)
        if not check_password_hash(user.password_hash, password or ""):
            _logger.warning("Login failed: username=%s", username)
            raise AuthError(WRONG_CREDENTIALS)

        session = SessionRecord(
            token=secrets.token_urlsafe(self.token_bytes),
            user_id=user.id,
            created_at=datetime.now(tz=UTC),
        )
        self.session_repository.add(session)
        _logger.info("Login succeeded: username=%s", user.username)
        return session, user

    def logout(self, token: str | None) -> None:
        """Invalidate a session. Unknown or missing tokens are a no-op."""
        if token:
            self.session_repository.remove(token)

    def resolve(self, token: str | None) -> UserRecord:
        """Return the user behind a session token."""
        if not token:
            raise AuthError("token missing")
        session = self.session_repository.get(token)
        if session is None:
            raise AuthError("token invalid")
        user = self.user_repository.get_by_id(session.user_id)
        if user is None:
            raise AuthError("token invalid")
        return user

    def resolve_optional(self, token: str | None) -> UserRecord | None:
        """Like resolve, but return None instead of raising."""
        try:
            return self.resolve(token)
        except AuthError:
            return None

