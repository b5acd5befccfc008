"""Login and logout endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, Response, status

from bloglist.api.auth import bearer_token
from bloglist.api.models import LoginRequest
from bloglist.api.serializers import serialize_user

if TYPE_CHECKING:
    from bloglist.containers import AppContainer

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Exchange credentials for a session token."""
    container: AppContainer = request.app.state.container
    session, user = container.session_service.login(payload.username, payload.password)
    return {"token": session.token, "user": serialize_user(user)}


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    request: Request, token: str | None = Depends(bearer_token)
) -> Response:
    """Invalidate the caller's session."""
    container: AppContainer = request.app.state.container
    container.session_service.logout(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
