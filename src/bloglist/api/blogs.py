"""Blog list endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, Response, status

from bloglist.api.auth import bearer_token
from bloglist.api.models import BlogCreateRequest
from bloglist.api.serializers import serialize_blog

if TYPE_CHECKING:
    from bloglist.containers import AppContainer
    from bloglist.domain.models import BlogEntry, UserRecord

router = APIRouter(prefix="/api/blogs", tags=["blogs"])


def _present(
    container: AppContainer, entry: BlogEntry, caller: UserRecord | None
) -> dict[str, object]:
    owner = container.user_service.get_user(entry.owner_user_id)
    return serialize_blog(entry, owner, caller)


@router.get("")
async def list_blogs(
    request: Request, token: str | None = Depends(bearer_token)
) -> list[dict[str, object]]:
    """Return all blogs, most liked first."""
    container: AppContainer = request.app.state.container
    caller = container.session_service.resolve_optional(token)
    ranked = container.ranking_service.ranked_list()
    owners = {user.id: user for user in container.user_service.list_users()}
    payload = []
    for entry in ranked:
        owner = owners.get(entry.owner_user_id)
        if owner is None:
            owner = container.user_service.get_user(entry.owner_user_id)
        payload.append(serialize_blog(entry, owner, caller))
    return payload


@router.get("/{blog_id}")
async def get_blog(
    blog_id: UUID, request: Request, token: str | None = Depends(bearer_token)
) -> dict[str, object]:
    """Return a single blog."""
    container: AppContainer = request.app.state.container
    caller = container.session_service.resolve_optional(token)
    return _present(container, container.blog_service.get(blog_id), caller)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_blog(
    payload: BlogCreateRequest,
    request: Request,
    token: str | None = Depends(bearer_token),
) -> dict[str, object]:
    """Create a blog owned by the caller."""
    container: AppContainer = request.app.state.container
    entry = container.blog_service.create(
        token, title=payload.title, author=payload.author, url=payload.url
    )
    caller = container.session_service.resolve_optional(token)
    return _present(container, entry, caller)


@router.put("/{blog_id}/likes")
async def like_blog(
    blog_id: UUID,
    request: Request,
    token: str | None = Depends(bearer_token),
) -> dict[str, object]:
    """Add one like to a blog. Any request body is ignored."""
    container: AppContainer = request.app.state.container
    entry = container.blog_service.like(blog_id)
    caller = container.session_service.resolve_optional(token)
    return _present(container, entry, caller)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: UUID, request: Request, token: str | None = Depends(bearer_token)
) -> Response:
    """Delete a blog owned by the caller."""
    container: AppContainer = request.app.state.container
    container.blog_service.delete(token, blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
