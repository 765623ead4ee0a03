# tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from blog_client.app import BlogApp
from blog_client.schemas import Comment, Post, User
from blog_client.services.client import Service, ServiceClient, ServiceConfig
from blog_client.stubs import (
    StubStore,
    create_comment_service,
    create_post_service,
    create_user_service,
)

TEST_CONFIG = ServiceConfig(
    user_url="http://users.test",
    post_url="http://posts.test",
    comment_url="http://comments.test",
)


@pytest.fixture
def author() -> User:
    return User(id=1, username="demo_user", email="demo@example.com", bio="")


@pytest.fixture
def other_user() -> User:
    return User(id=2, username="reader", email="reader@example.com", bio="")


@pytest.fixture
def posts() -> list[Post]:
    return [
        Post(id=1, title="Welcome", content="First post", author_id=1, created_at="2024-01-15"),
        Post(id=2, title="Architecture", content="Services", author_id=2, created_at="2024-01-16"),
    ]


@pytest.fixture
def make_comment() -> Callable[..., Comment]:
    def _make(comment_id: int, post_id: int, author_id: int = 1, content: str = "hi") -> Comment:
        return Comment(
            id=comment_id,
            content=content,
            author_id=author_id,
            post_id=post_id,
            created_at="2024-01-17",
        )

    return _make


@pytest.fixture
def mock_client() -> AsyncMock:
    client = AsyncMock(spec=ServiceClient)
    client.list_posts.return_value = []
    client.list_comments.return_value = []
    return client


@pytest.fixture
def app(mock_client: AsyncMock) -> BlogApp:
    return BlogApp(client=mock_client)


@pytest.fixture
def stub_store() -> StubStore:
    return StubStore.seeded()


@pytest.fixture
def stub_transports(stub_store: StubStore) -> dict[Service, httpx.AsyncBaseTransport]:
    return {
        Service.USER: httpx.ASGITransport(app=create_user_service(stub_store)),
        Service.POST: httpx.ASGITransport(app=create_post_service(stub_store)),
        Service.COMMENT: httpx.ASGITransport(app=create_comment_service(stub_store)),
    }


@pytest_asyncio.fixture
async def stub_client(
    stub_transports: dict[Service, httpx.AsyncBaseTransport],
) -> AsyncIterator[ServiceClient]:
    client = ServiceClient(TEST_CONFIG, transports=stub_transports)
    try:
        yield client
    finally:
        await client.close()


@pytest_asyncio.fixture
async def stub_app(stub_client: ServiceClient) -> AsyncIterator[BlogApp]:
    async with BlogApp(client=stub_client) as blog:
        yield blog
