"""Supabase-backed blog repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from bloglist.domain.models import BlogEntry
from bloglist.services.blogs import BlogRepository

_COLUMNS = "id, title, author, url, likes, user_id, created_at"
_NIL_UUID = "00000000-0000-0000-0000-000000000000"


@dataclass
class SupabaseBlogRepository(BlogRepository):
    """Supabase implementation for blog entries."""

    client: Client

    def create_blog(
        self, title: str, author: str, url: str, owner_user_id: UUID
    ) -> BlogEntry:
        """Insert a blog row and return it."""
        response = (
            self.client.table("blogs")
            .insert(
                {
                    "title": title,
                    "author": author,
                    "url": url,
                    "likes": 0,
                    "user_id": str(owner_user_id),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create blog in Supabase")
        return _parse_blog(response.data[0])

    def get_blog(self, blog_id: UUID) -> BlogEntry | None:
        """Return a blog by id, if present."""
        response = (
            self.client.table("blogs")
            .select(_COLUMNS)
            .eq("id", str(blog_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_blog(response.data[0])

    def list_blogs(self) -> list[BlogEntry]:
        """Return all blogs in creation order."""
        response = (
            self.client.table("blogs")
            .select(_COLUMNS)
            .order("created_at")
            .order("id")
            .execute()
        )
        return [_parse_blog(row) for row in response.data or []]

    def increment_likes(self, blog_id: UUID) -> BlogEntry | None:
        """Increment likes in a single UPDATE via the increment_blog_likes function."""
        response = self.client.rpc(
            "increment_blog_likes", {"blog_id": str(blog_id)}
        ).execute()
        if not response.data:
            return None
        return _parse_blog(response.data[0])

    def delete_blog(self, blog_id: UUID) -> bool:
        """Delete a blog row, returning whether one was removed."""
        response = self.client.table("blogs").delete().eq("id", str(blog_id)).execute()
        return bool(response.data)

    def clear(self) -> None:
        """Delete every blog row."""
        self.client.table("blogs").delete().neq("id", _NIL_UUID).execute()


def _parse_blog(row: dict[str, object]) -> BlogEntry:
    return BlogEntry(
        id=UUID(str(row["id"])),
        title=str(row["title"]),
        author=str(row.get("author") or ""),
        url=str(row["url"]),
        likes=int(row.get("likes") or 0),
        owner_user_id=UUID(str(row["user_id"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
