"""Seeded in-memory storage shared by the stub services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from itertools import count

from blog_client.schemas import Comment, CommentCreate, Post, PostCreate, User, UserCreate

SEED_USERS = (
    User(id=1, username="demo_user", email="demo@example.com", full_name="Demo User", bio=""),
    User(id=2, username="reader", email="reader@example.com", full_name="Reader", bio=""),
)

SEED_POSTS = (
    Post(
        id=1,
        title="Welcome to Our Blog",
        content="This is the first post on our microservices blog!",
        author_id=1,
        created_at="2024-01-15",
    ),
    Post(
        id=2,
        title="Microservices Architecture",
        content="Learn about building scalable applications with microservices...",
        author_id=1,
        created_at="2024-01-16",
    ),
)

SEED_COMMENT_TEXTS = (
    (1, "Great post!"),
    (2, "Very informative, thank you!"),
)


def _today() -> str:
    return date.today().isoformat()


@dataclass
class StubStore:
    """Users, posts and comments held in memory, ids assigned sequentially."""

    users: dict[int, User] = field(default_factory=dict)
    posts: dict[int, Post] = field(default_factory=dict)
    comments: dict[int, Comment] = field(default_factory=dict)
    _user_ids: count = field(default_factory=lambda: count(1))
    _post_ids: count = field(default_factory=lambda: count(1))
    _comment_ids: count = field(default_factory=lambda: count(1))

    @classmethod
    def seeded(cls) -> StubStore:
        """Return a store holding the demo users, two posts and two comments per post."""
        store = cls()
        for user in SEED_USERS:
            store.users[next(store._user_ids)] = user
        for post in SEED_POSTS:
            store.posts[next(store._post_ids)] = post
        for post in SEED_POSTS:
            for author_id, text in SEED_COMMENT_TEXTS:
                comment_id = next(store._comment_ids)
                store.comments[comment_id] = Comment(
                    id=comment_id,
                    content=text,
                    author_id=author_id,
                    post_id=post.id,
                    created_at="2024-01-17",
                )
        return store

    def add_user(self, data: UserCreate) -> User | None:
        """Store a new user, or return None if the username or email is taken."""
        for user in self.users.values():
            if user.username == data.username or user.email == data.email:
                return None
        user = User(id=next(self._user_ids), **data.model_dump())
        self.users[user.id] = user
        return user

    def add_post(self, data: PostCreate) -> Post:
        post = Post(id=next(self._post_ids), created_at=_today(), **data.model_dump())
        self.posts[post.id] = post
        return post

    def remove_post(self, post_id: int) -> bool:
        return self.posts.pop(post_id, None) is not None

    def add_comment(self, data: CommentCreate) -> Comment:
        comment = Comment(id=next(self._comment_ids), created_at=_today(), **data.model_dump())
        self.comments[comment.id] = comment
        return comment

    def comments_for(self, post_id: int) -> list[Comment]:
        return [comment for comment in self.comments.values() if comment.post_id == post_id]
