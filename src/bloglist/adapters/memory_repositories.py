"""Thread-safe in-memory repositories."""

import threading
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

from bloglist.domain.errors import ConflictError
from bloglist.domain.models import BlogEntry, SessionRecord, UserRecord
from bloglist.services.blogs import BlogRepository
from bloglist.services.sessions import SessionRepository
from bloglist.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user storage keyed by id."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get_by_username(self, username: str) -> UserRecord | None:
        with self._lock:
            for user in self.users.values():
                if user.username == username:
                    return user
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        with self._lock:
            return self.users.get(user_id)

    def create_user(self, name: str, username: str, password_hash: str) -> UserRecord:
        with self._lock:
            if any(user.username == username for user in self.users.values()):
                raise ConflictError("username must be unique")
            user = UserRecord(
                id=uuid4(),
                name=name,
                username=username,
                password_hash=password_hash,
            )
            self.users[user.id] = user
            return user

    def list_users(self) -> list[UserRecord]:
        with self._lock:
            return list(self.users.values())

    def clear(self) -> None:
        with self._lock:
            self.users.clear()


@dataclass
class InMemorySessionRepository(SessionRepository):
    """Process-local session storage."""

    sessions: dict[str, SessionRecord] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def add(self, session: SessionRecord) -> None:
        with self._lock:
            self.sessions[session.token] = session

    def get(self, token: str) -> SessionRecord | None:
        with self._lock:
            return self.sessions.get(token)

    def remove(self, token: str) -> None:
        with self._lock:
            self.sessions.pop(token, None)

    def clear(self) -> None:
        with self._lock:
            self.sessions.clear()


@dataclass
class InMemoryBlogRepository(BlogRepository):
    """In-memory blog storage; dict order is creation order."""

    blogs: dict[UUID, BlogEntry] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def create_blog(
        self, title: str, author: str, url: str, owner_user_id: UUID
    ) -> BlogEntry:
        entry = BlogEntry(
            id=uuid4(),
            title=title,
            author=author,
            url=url,
            likes=0,
            owner_user_id=owner_user_id,
            created_at=datetime.now(tz=UTC),
        )
        with self._lock:
            self.blogs[entry.id] = entry
        return entry

    def get_blog(self, blog_id: UUID) -> BlogEntry | None:
        with self._lock:
            return self.blogs.get(blog_id)

    def list_blogs(self) -> list[BlogEntry]:
        with self._lock:
            return list(self.blogs.values())

    def increment_likes(self, blog_id: UUID) -> BlogEntry | None:
        with self._lock:
            current = self.blogs.get(blog_id)
            if current is None:
                return None
            updated = replace(current, likes=current.likes + 1)
            self.blogs[blog_id] = updated
            return updated

    def delete_blog(self, blog_id: UUID) -> bool:
        with self._lock:
            return self.blogs.pop(blog_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self.blogs.clear()
