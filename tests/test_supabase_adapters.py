"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import pytest
from postgrest.exceptions import APIError

from bloglist.adapters.supabase_blog_repository import SupabaseBlogRepository
from bloglist.adapters.supabase_user_repository import SupabaseUserRepository
from bloglist.domain.errors import ConflictError


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeQuery:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "delete": [], "rpc": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, str, object]] = field(default_factory=list)
    orderings: list[str] = field(default_factory=list)
    error: Exception | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeQuery":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeQuery":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeQuery":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeQuery":  # type: ignore[no-untyped-def]
        self.last_filters.append(("eq", column, value))
        return self

    def neq(self, column: str, value) -> "FakeQuery":  # type: ignore[no-untyped-def]
        self.last_filters.append(("neq", column, value))
        return self

    def limit(self, _count: int) -> "FakeQuery":
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.orderings.append(column)
        return self

    def execute(self) -> FakeResponse:
        if self.error is not None:
            raise self.error
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeQuery] = field(default_factory=dict)
    rpc_calls: list[tuple[str, dict[str, object]]] = field(default_factory=list)

    def table(self, name: str) -> FakeQuery:
        if name not in self.tables:
            self.tables[name] = FakeQuery(name=name)
        return self.tables[name]

    def rpc(self, fn: str, params: dict[str, object]) -> FakeQuery:
        self.rpc_calls.append((fn, params))
        query = self.table(f"rpc:{fn}")
        query._action = "rpc"
        return query


def _blog_row(blog_id: str, user_id: str, likes: int = 0) -> dict[str, object]:
    return {
        "id": blog_id,
        "title": "title",
        "author": "author",
        "url": "https://example.com",
        "likes": likes,
        "user_id": user_id,
        "created_at": datetime.now(tz=UTC).isoformat(),
    }


def test_supabase_user_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    users_table = client.table("users")
    user_id = str(uuid4())
    row = {
        "id": user_id,
        "name": "John Smith",
        "username": "john",
        "password_hash": "hash",
    }
    users_table.queue("insert", [row])
    users_table.queue("select", [row])

    repository = SupabaseUserRepository(client)
    created = repository.create_user("John Smith", "john", "hash")
    fetched = repository.get_by_username("john")

    assert str(created.id) == user_id
    assert fetched == created
    assert users_table.last_payload == {
        "name": "John Smith",
        "username": "john",
        "password_hash": "hash",
    }
    assert ("eq", "username", "john") in users_table.last_filters


def test_supabase_user_repository_missing_user() -> None:
    repository = SupabaseUserRepository(FakeSupabaseClient())

    assert repository.get_by_username("nobody") is None
    assert repository.get_by_id(uuid4()) is None


def test_supabase_user_repository_maps_unique_violation() -> None:
    client = FakeSupabaseClient()
    client.table("users").error = APIError(
        {"message": "duplicate key", "code": "23505", "hint": None, "details": None}
    )

    repository = SupabaseUserRepository(client)

    with pytest.raises(ConflictError):
        repository.create_user("John Smith", "john", "hash")


def test_supabase_blog_repository_create_and_list() -> None:
    client = FakeSupabaseClient()
    blogs_table = client.table("blogs")
    blog_id = str(uuid4())
    user_id = str(uuid4())
    blogs_table.queue("insert", [_blog_row(blog_id, user_id)])
    blogs_table.queue("select", [_blog_row(blog_id, user_id)])

    repository = SupabaseBlogRepository(client)
    created = repository.create_blog("title", "author", "https://example.com", uuid4())
    listed = repository.list_blogs()

    assert str(created.id) == blog_id
    assert created.likes == 0
    assert [str(entry.id) for entry in listed] == [blog_id]
    assert isinstance(blogs_table.last_payload, dict)
    assert blogs_table.last_payload["likes"] == 0


def test_supabase_blog_repository_list_breaks_timestamp_ties_by_id() -> None:
    client = FakeSupabaseClient()
    blogs_table = client.table("blogs")

    SupabaseBlogRepository(client).list_blogs()

    assert blogs_table.orderings == ["created_at", "id"]


def test_supabase_blog_repository_increment_uses_rpc() -> None:
    client = FakeSupabaseClient()
    blog_id = str(uuid4())
    client.table("rpc:increment_blog_likes").queue(
        "rpc", [_blog_row(blog_id, str(uuid4()), likes=4)]
    )

    repository = SupabaseBlogRepository(client)
    updated = repository.increment_likes(uuid4())
    missing = repository.increment_likes(uuid4())

    assert updated is not None
    assert updated.likes == 4
    assert missing is None
    assert [call[0] for call in client.rpc_calls] == [
        "increment_blog_likes",
        "increment_blog_likes",
    ]


def test_supabase_blog_repository_delete_reports_existence() -> None:
    client = FakeSupabaseClient()
    blogs_table = client.table("blogs")
    blog_id = str(uuid4())
    blogs_table.queue("delete", [_blog_row(blog_id, str(uuid4()))])

    repository = SupabaseBlogRepository(client)

    assert repository.delete_blog(uuid4()) is True
    assert repository.delete_blog(uuid4()) is False


def test_supabase_clear_filters_every_row() -> None:
    client = FakeSupabaseClient()

    SupabaseBlogRepository(client).clear()
    SupabaseUserRepository(client).clear()

    assert client.table("blogs").last_filters[0][0] == "neq"
    assert client.table("users").last_filters[0][0] == "neq"
