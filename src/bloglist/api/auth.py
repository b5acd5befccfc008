"""Bearer token extraction for API routes."""

from fastapi import Header


async def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Return the token from an ``Authorization: Bearer`` header, if any."""
    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(" ")
    credentials = credentials.strip()
    if scheme.lower() != "bearer" or not credentials:
        return None
    return credentials
