"""Popularity ordering for the blog list."""

from collections.abc import Iterable
from dataclasses import dataclass

from bloglist.domain.models import BlogEntry
from bloglist.services.blogs import BlogService


def rank_blogs(entries: Iterable[BlogEntry]) -> list[BlogEntry]:
    """Sort entries by likes, most first. Ties keep their incoming order."""
    return sorted(entries, key=lambda entry: entry.likes, reverse=True)


@dataclass
class RankingService:
    """Computes the ranked list from the registry on every read."""

    blog_service: BlogService

    def ranked_list(self) -> list[BlogEntry]:
        """Return all entries, most liked first."""
        return rank_blogs(self.blog_service.list())
