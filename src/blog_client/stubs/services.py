"""FastAPI apps mimicking the three blog services."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status

from blog_client.schemas import Comment, CommentCreate, Post, PostCreate, User, UserCreate

from .store import StubStore


def get_store(request: Request) -> StubStore:
    return request.app.state.store


StoreDep = Annotated[StubStore, Depends(get_store)]

users_router = APIRouter(prefix="/users", tags=["users"])
posts_router = APIRouter(prefix="/posts", tags=["posts"])
comments_router = APIRouter(prefix="/comments", tags=["comments"])


@users_router.get("", response_model=list[User])
async def list_users(store: StoreDep) -> list[User]:
    return list(store.users.values())


@users_router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreate, store: StoreDep) -> User:
    user = store.add_user(payload)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username or email already registered",
        )
    return user


@posts_router.get("", response_model=list[Post])
async def list_posts(store: StoreDep) -> list[Post]:
    return list(store.posts.values())


@posts_router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
async def create_post(payload: PostCreate, store: StoreDep) -> Post:
    return store.add_post(payload)


@posts_router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: int, store: StoreDep) -> None:
    if not store.remove_post(post_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


@comments_router.get("/post/{post_id}", response_model=list[Comment])
async def list_comments(post_id: int, store: StoreDep) -> list[Comment]:
    return store.comments_for(post_id)


@comments_router.post("", response_model=Comment, status_code=status.HTTP_201_CREATED)
async def create_comment(payload: CommentCreate, store: StoreDep) -> Comment:
    return store.add_comment(payload)


def _build(title: str, router: APIRouter, store: StubStore | None) -> FastAPI:
    app = FastAPI(title=title, version="1.0.0")
    app.state.store = store if store is not None else StubStore.seeded()
    app.include_router(router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    return app


def create_user_service(store: StubStore | None = None) -> FastAPI:
    return _build("Blog User Service (stub)", users_router, store)


def create_post_service(store: StubStore | None = None) -> FastAPI:
    return _build("Blog Post Service (stub)", posts_router, store)


def create_comment_service(store: StubStore | None = None) -> FastAPI:
    return _build("Blog Comment Service (stub)", comments_router, store)
