"""Pydantic models for API request bodies."""

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Payload for creating a user."""

    name: str
    username: str
    password: str


class LoginRequest(BaseModel):
    """Payload for logging in."""

    username: str
    password: str


class BlogCreateRequest(BaseModel):
    """Payload for creating a blog entry."""

    title: str
    url: str
    author: str = ""

