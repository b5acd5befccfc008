"""Maintenance endpoints mounted only in the test environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

if TYPE_CHECKING:
    from bloglist.containers import AppContainer

router = APIRouter(prefix="/api/testing", tags=["testing"])


@router.post("/reset", status_code=status.HTTP_204_NO_CONTENT)
async def reset(request: Request) -> Response:
    """Wipe all users, sessions and blogs."""
    container: AppContainer = request.app.state.container
    container.reset_service.reset()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
