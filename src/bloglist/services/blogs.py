"""Blog registry: creation, likes and deletion."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from bloglist.domain.errors import ForbiddenError, NotFoundError, ValidationError
from bloglist.domain.models import BlogEntry
from bloglist.services.authorization import can_delete
from bloglist.services.sessions import SessionService

_logger = logging.getLogger(__name__)


class BlogRepository(Protocol):
    """Persistence interface for blog entries."""

    def create_blog(
        self, title: str, author: str, url: str, owner_user_id: UUID
    ) -> BlogEntry:
        """Create an entry with zero likes and return it."""

    def get_blog(self, blog_id: UUID) -> BlogEntry | None:
        """Return an entry by id, if present."""

    def list_blogs(self) -> list[BlogEntry]:
        """Return all entries in creation order."""

    def increment_likes(self, blog_id: UUID) -> BlogEntry | None:
        """Atomically add one like and return the entry, or None if absent."""

    def delete_blog(self, blog_id: UUID) -> bool:
        """Delete an entry, returning False if it did not exist."""

    def clear(self) -> None:
        """Remove every entry."""


@dataclass
class BlogService:
    """Application service for blog entries."""

    repository: BlogRepository
    session_service: SessionService

    def create(self, token: str | None, title: str, author: str, url: str) -> BlogEntry:
        """Create an entry owned by the session's user."""
        user = self.session_service.resolve(token)
        title = (title or "").strip()
        url = (url or "").strip()
        if not title or not url:
            raise ValidationError("title and url are required")

        entry = self.repository.create_blog(
            title=title,
            author=(author or "").strip(),
            url=url,
            owner_user_id=user.id,
        )
        _logger.info("Blog created: id=%s owner=%s", entry.id, user.username)
        return entry

    def get(self, blog_id: UUID) -> BlogEntry:
        """Return an entry or raise NotFoundError."""
        entry = self.repository.get_blog(blog_id)
        if entry is None:
            raise NotFoundError("blog not found")
        return entry

    def like(self, blog_id: UUID) -> BlogEntry:
        """Add one like to an entry."""
        entry = self.repository.increment_likes(blog_id)
        if entry is None:
            raise NotFoundError("blog not found")
        return entry

    def delete(self, token: str | None, blog_id: UUID) -> None:
        """Delete an entry if the session's user owns it."""
        user = self.session_service.resolve(token)
        entry = self.get(blog_id)
        if not can_delete(user, entry):
            _logger.warning(
                "Blog delete denied: id=%s caller=%s", blog_id, user.username
            )
            raise ForbiddenError("only the creator can delete a blog")
        if not self.repository.delete_blog(blog_id):
            raise NotFoundError("blog not found")
        _logger.info("Blog deleted: id=%s owner=%s", blog_id, user.username)

    def list(self) -> list[BlogEntry]:
        """Return all entries in creation order."""
        return self.repository.list_blogs()
