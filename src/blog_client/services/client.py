"""HTTP client for the blog's user, post and comment services.

This module provides the ServiceClient class that handles all communication
between the blog client and its three backend services. It includes:

- One lazily created ``httpx.AsyncClient`` per service
- A typed failure for every endpoint
- Response validation into the shared pydantic schemas

Every non-2xx response and every transport error is translated into the
failure kind of the endpoint that was called. Status codes are recorded on
the exception but never used to pick a different failure. Nothing is retried.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from blog_client.core.settings import settings
from blog_client.schemas import Comment, CommentCreate, Post, PostCreate, User, UserCreate

# Configure logger for this module
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

ModelT = TypeVar("ModelT")

_USER = TypeAdapter(User)
_POST = TypeAdapter(Post)
_COMMENT = TypeAdapter(Comment)
_USERS = TypeAdapter(list[User])
_POSTS = TypeAdapter(list[Post])
_COMMENTS = TypeAdapter(list[Comment])


class BlogServiceError(RuntimeError):
    """Base exception raised when a backend service call fails.

    ``status_code`` holds the HTTP status when the service answered, and is
    ``None`` for transport failures and unreadable bodies.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RegistrationFailed(BlogServiceError):
    """Raised when the user service rejects a registration."""


class UserNotFound(BlogServiceError):
    """Raised when no user matches the login email, or the user list is unavailable."""


class PostsUnavailable(BlogServiceError):
    """Raised when the post list cannot be fetched."""


class PostCreateFailed(BlogServiceError):
    """Raised when the post service rejects a new post."""


class PostDeleteFailed(BlogServiceError):
    """Raised when the post service refuses a delete."""


class CommentsUnavailable(BlogServiceError):
    """Raised when a post's comments cannot be fetched."""


class CommentCreateFailed(BlogServiceError):
    """Raised when the comment service rejects a new comment."""


class Service(str, Enum):
    """The three independent backend services."""

    USER = "user"
    POST = "post"
    COMMENT = "comment"


@dataclass(frozen=True)
class ServiceConfig:
    """Immutable configuration for service calls."""

    user_url: str
    post_url: str
    comment_url: str
    timeout_seconds: float | None = None

    def base_url(self, service: Service) -> str:
        """Return the base URL configured for ``service``."""
        return {
            Service.USER: self.user_url,
            Service.POST: self.post_url,
            Service.COMMENT: self.comment_url,
        }[service]


def load_service_config() -> ServiceConfig:
    """Build configuration object from global settings."""

    return ServiceConfig(
        user_url=settings.user_service_url,
        post_url=settings.post_service_url,
        comment_url=settings.comment_service_url,
        timeout_seconds=settings.http_timeout_seconds,
    )


class ServiceClient:
    """HTTP client wrapper for the user, post and comment services.

    Transports can be injected per service, which is how tests and the
    in-process stub services are wired in.
    """

    def __init__(
        self,
        config: ServiceConfig | None = None,
        *,
        transports: Mapping[Service, httpx.AsyncBaseTransport] | None = None,
    ) -> None:
        self.config = config or load_service_config()
        self._transports = dict(transports or {})
        self._clients: dict[Service, httpx.AsyncClient] = {}
        self._client_lock = asyncio.Lock()

    async def __aenter__(self) -> ServiceClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _ensure_client(self, service: Service) -> httpx.AsyncClient:
        async with self._client_lock:
            client = self._clients.get(service)
            if client is None:
                client = httpx.AsyncClient(
                    base_url=self.config.base_url(service),
                    timeout=httpx.Timeout(self.config.timeout_seconds),
                    transport=self._transports.get(service),
                )
                self._clients[service] = client
        return client

    @dataclass
    class RequestParams:
        """Parameters for HTTP requests."""
        service: Service
        method: str
        path: str
        json_data: Any | None = None

    async def _request(
        self, params: RequestParams, failure: type[BlogServiceError]
    ) -> httpx.Response:
        client = await self._ensure_client(params.service)
        endpoint = f"{params.method} {params.service.value}{params.path}"
        logger.debug("Sending %s", endpoint)

        try:
            response = await client.request(
                params.method,
                params.path,
                json=params.json_data,
            )
        except httpx.HTTPError as exc:
            raise failure(f"{endpoint} failed: {exc}") from exc

        if not response.is_success:
            raise failure(
                f"{endpoint} responded with {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _parse(
        response: httpx.Response,
        adapter: TypeAdapter[ModelT],
        failure: type[BlogServiceError],
    ) -> ModelT:
        try:
            return adapter.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            raise failure(
                f"Unreadable response body from {response.request.url}",
                status_code=response.status_code,
            ) from exc

    async def register(self, username: str, email: str, password: str) -> User:
        """Create a user account and return the created user.

        The password is accepted for interface parity but never sent: the user
        service performs no credential checks.
        """
        del password
        payload = UserCreate(username=username, email=email, full_name=username, bio="")
        response = await self._request(
            self.RequestParams(
                service=Service.USER,
                method="POST",
                path=f"{API_PREFIX}/users",
                json_data=payload.model_dump(),
            ),
            RegistrationFailed,
        )
        return self._parse(response, _USER, RegistrationFailed)

    async def login(self, email: str, password: str) -> User:
        """Resolve a user by email from the full user list.

        There is no credential check; a failed fetch is reported the same way
        as an unknown email.
        """
        del password
        response = await self._request(
            self.RequestParams(service=Service.USER, method="GET", path=f"{API_PREFIX}/users"),
            UserNotFound,
        )
        users = self._parse(response, _USERS, UserNotFound)
        for user in users:
            if user.email == email:
                return user
        raise UserNotFound(f"No user registered with email {email!r}")

    async def list_posts(self) -> list[Post]:
        """Fetch every post."""
        response = await self._request(
            self.RequestParams(service=Service.POST, method="GET", path=f"{API_PREFIX}/posts"),
            PostsUnavailable,
        )
        return self._parse(response, _POSTS, PostsUnavailable)

    async def create_post(self, title: str, content: str, author_id: int) -> Post:
        """Create a post and return it with its server-assigned id and date."""
        payload = PostCreate(title=title, content=content, author_id=author_id)
        response = await self._request(
            self.RequestParams(
                service=Service.POST,
                method="POST",
                path=f"{API_PREFIX}/posts",
                json_data=payload.model_dump(),
            ),
            PostCreateFailed,
        )
        return self._parse(response, _POST, PostCreateFailed)

    async def delete_post(self, post_id: int) -> None:
        """Delete a post."""
        await self._request(
            self.RequestParams(
                service=Service.POST, method="DELETE", path=f"{API_PREFIX}/posts/{post_id}"
            ),
            PostDeleteFailed,
        )

    async def list_comments(self, post_id: int) -> list[Comment]:
        """Fetch the comments of one post."""
        response = await self._request(
            self.RequestParams(
                service=Service.COMMENT,
                method="GET",
                path=f"{API_PREFIX}/comments/post/{post_id}",
            ),
            CommentsUnavailable,
        )
        return self._parse(response, _COMMENTS, CommentsUnavailable)

    async def create_comment(self, post_id: int, content: str, author_id: int) -> Comment:
        """Create a comment on ``post_id`` and return it."""
        payload = CommentCreate(content=content, post_id=post_id, author_id=author_id)
        response = await self._request(
            self.RequestParams(
                service=Service.COMMENT,
                method="POST",
                path=f"{API_PREFIX}/comments",
                json_data=payload.model_dump(),
            ),
            CommentCreateFailed,
        )
        return self._parse(response, _COMMENT, CommentCreateFailed)

    async def close(self) -> None:
        """Clean up underlying HTTP client resources."""

        async with self._client_lock:
            clients = list(self._clients.values())
            self._clients.clear()
        for client in clients:
            await client.aclose()
