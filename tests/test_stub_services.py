from datetime import date

import pytest
from fastapi.testclient import TestClient

from blog_client.stubs import (
    StubStore,
    create_comment_service,
    create_post_service,
    create_user_service,
)


@pytest.fixture
def store() -> StubStore:
    return StubStore.seeded()


def test_seeded_store_matches_demo_data(store: StubStore) -> None:
    assert [post.title for post in store.posts.values()] == [
        "Welcome to Our Blog",
        "Microservices Architecture",
    ]
    assert len(store.comments_for(1)) == 2
    assert len(store.comments_for(2)) == 2
    assert store.users[1].username == "demo_user"


def test_user_service_lists_and_creates(store: StubStore) -> None:
    client = TestClient(create_user_service(store))

    assert len(client.get("/api/v1/users").json()) == 2

    response = client.post(
        "/api/v1/users",
        json={"username": "alice", "email": "alice@example.com", "full_name": "alice", "bio": ""},
    )
    assert response.status_code == 201
    assert response.json()["id"] == 3

    duplicate = client.post(
        "/api/v1/users",
        json={"username": "alice", "email": "other@example.com", "full_name": "alice", "bio": ""},
    )
    assert duplicate.status_code == 409


def test_post_service_create_and_delete(store: StubStore) -> None:
    client = TestClient(create_post_service(store))

    response = client.post(
        "/api/v1/posts", json={"title": "T", "content": "C", "author_id": 2}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 3
    assert body["created_at"] == date.today().isoformat()

    assert client.delete("/api/v1/posts/3").status_code == 204
    assert client.delete("/api/v1/posts/3").status_code == 404
    assert [post["id"] for post in client.get("/api/v1/posts").json()] == [1, 2]


def test_comment_service_scopes_by_post(store: StubStore) -> None:
    client = TestClient(create_comment_service(store))

    response = client.post(
        "/api/v1/comments", json={"content": "hey", "post_id": 2, "author_id": 1}
    )
    assert response.status_code == 201

    comments = client.get("/api/v1/comments/post/2").json()
    assert [comment["content"] for comment in comments][-1] == "hey"
    assert all(comment["post_id"] == 2 for comment in comments)
    assert client.get("/api/v1/comments/post/99").json() == []


def test_health(store: StubStore) -> None:
    client = TestClient(create_post_service(store))
    assert client.get("/health").json() == {"status": "ok"}
