"""Ownership checks for blog mutations."""

from bloglist.domain.models import BlogEntry, UserRecord


def can_delete(user: UserRecord | None, entry: BlogEntry) -> bool:
    """Return True if the user owns the entry."""
    return user is not None and user.id == entry.owner_user_id
