from unittest.mock import AsyncMock

import pytest

from blog_client.schemas import Post, User
from blog_client.services.client import RegistrationFailed, UserNotFound
from blog_client.state import SessionState


@pytest.mark.asyncio
async def test_login_sets_user(mock_client: AsyncMock, author: User) -> None:
    mock_client.login.return_value = author
    session = SessionState(mock_client)

    assert await session.login("demo@example.com", "pw") == author
    assert session.user == author
    assert session.is_authenticated
    assert session.user_id == 1
    mock_client.login.assert_awaited_once_with("demo@example.com", "pw")


@pytest.mark.asyncio
async def test_failed_login_keeps_previous_session(
    mock_client: AsyncMock, author: User
) -> None:
    session = SessionState(mock_client)
    session.user = author
    mock_client.login.side_effect = UserNotFound("no such user")

    with pytest.raises(UserNotFound):
        await session.login("ghost@example.com", "pw")
    assert session.user == author


@pytest.mark.asyncio
async def test_register_sets_user(mock_client: AsyncMock, other_user: User) -> None:
    mock_client.register.return_value = other_user
    session = SessionState(mock_client)

    await session.register("reader", "reader@example.com", "pw")
    assert session.user == other_user


@pytest.mark.asyncio
async def test_failed_register_leaves_session_empty(mock_client: AsyncMock) -> None:
    mock_client.register.side_effect = RegistrationFailed("taken", status_code=409)
    session = SessionState(mock_client)

    with pytest.raises(RegistrationFailed):
        await session.register("reader", "reader@example.com", "pw")
    assert session.user is None
    assert session.user_id is None


def test_logout_clears_without_network(mock_client: AsyncMock, author: User) -> None:
    session = SessionState(mock_client)
    session.user = author

    session.logout()
    session.logout()

    assert session.user is None
    assert not session.is_authenticated
    assert mock_client.mock_calls == []


def test_can_delete_only_own_posts(
    mock_client: AsyncMock, author: User, posts: list[Post]
) -> None:
    session = SessionState(mock_client)
    assert not session.can_delete(posts[0])

    session.user = author
    assert session.can_delete(posts[0])
    assert not session.can_delete(posts[1])
