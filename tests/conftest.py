"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from bloglist.adapters.memory_repositories import (
    InMemoryBlogRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
)
from bloglist.api.app import create_app
from bloglist.config import Settings
from bloglist.containers import AppContainer, assemble_container


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", environment="test")


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def blog_repository() -> InMemoryBlogRepository:
    return InMemoryBlogRepository()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    session_repository: InMemorySessionRepository,
    blog_repository: InMemoryBlogRepository,
) -> AppContainer:
    return assemble_container(
        settings,
        user_repository=user_repository,
        blog_repository=blog_repository,
        session_repository=session_repository,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def register_and_login(
    client: TestClient, name: str, username: str, password: str
) -> dict[str, str]:
    """Register a user over HTTP and return auth headers for it."""
    client.post(
        "/api/users",
        json={"name": name, "username": username, "password": password},
    )
    response = client.post(
        "/api/login", json={"username": username, "password": password}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
