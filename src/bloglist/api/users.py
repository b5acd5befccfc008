"""User registration endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from bloglist.api.models import RegisterRequest
from bloglist.api.serializers import serialize_user

if TYPE_CHECKING:
    from bloglist.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, request: Request) -> dict[str, object]:
    """Register a new user."""
    container: AppContainer = request.app.state.container
    user = container.user_service.register(
        name=payload.name,
        username=payload.username,
        password=payload.password,
    )
    return serialize_user(user)


@router.get("")
async def list_users(request: Request) -> list[dict[str, object]]:
    """Return all registered users."""
    container: AppContainer = request.app.state.container
    return [serialize_user(user) for user in container.user_service.list_users()]
