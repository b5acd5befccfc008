"""Maintenance operations used by end-to-end test runs."""

import logging
from dataclasses import dataclass

from bloglist.services.blogs import BlogRepository
from bloglist.services.sessions import SessionRepository
from bloglist.services.users import UserRepository

_logger = logging.getLogger(__name__)


@dataclass
class ResetService:
    """Wipes all stored state."""

    user_repository: UserRepository
    session_repository: SessionRepository
    blog_repository: BlogRepository

    def reset(self) -> None:
        """Remove every session, blog and user."""
        self.session_repository.clear()
        self.blog_repository.clear()
        self.user_repository.clear()
        _logger.warning("All users, sessions and blogs were reset")
