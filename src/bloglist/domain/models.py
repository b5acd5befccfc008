"""Domain models for the blog list."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a registered user."""

    id: UUID
    name: str
    username: str
    password_hash: str


@dataclass(frozen=True)
class SessionRecord:
    """An authenticated session bound to a user."""

    token: str
    user_id: UUID
    created_at: datetime


@dataclass(frozen=True)
class BlogEntry:
    """A shared blog link with its like counter."""

    id: UUID
    title: str
    author: str
    url: str
    likes: int
    owner_user_id: UUID
    created_at: datetime
