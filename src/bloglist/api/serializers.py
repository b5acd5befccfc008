"""JSON views of domain records."""

from bloglist.domain.models import BlogEntry, UserRecord
from bloglist.services.authorization import can_delete


def serialize_user(user: UserRecord) -> dict[str, object]:
    """Public view of a user, without credentials."""
    return {
        "id": str(user.id),
        "name": user.name,
        "username": user.username,
    }


def serialize_blog(
    entry: BlogEntry, owner: UserRecord | None, caller: UserRecord | None
) -> dict[str, object]:
    """Blog view with its owner and whether the caller may remove it."""
    return {
        "id": str(entry.id),
        "title": entry.title,
        "author": entry.author,
        "url": entry.url,
        "likes": entry.likes,
        "user": serialize_user(owner) if owner else None,
        "removable": can_delete(caller, entry),
    }
