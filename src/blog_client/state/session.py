"""Session state: the currently authenticated user, if any."""

from __future__ import annotations

import logging

from blog_client.schemas import Post, User
from blog_client.services.client import ServiceClient

logger = logging.getLogger(__name__)


class SessionState:
    """Holds zero or one session user.

    The user is derived only from login and registration responses. There is
    no token, no refresh and nothing persisted across restarts.
    """

    def __init__(self, client: ServiceClient) -> None:
        self._client = client
        self.user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def user_id(self) -> int | None:
        return self.user.id if self.user is not None else None

    def can_delete(self, post: Post) -> bool:
        """Return True when the session user authored ``post``."""
        return self.user is not None and self.user.id == post.author_id

    async def login(self, email: str, password: str) -> User:
        """Resolve the user by email and make it the session user.

        Raises:
            UserNotFound: The session is left unchanged.
        """
        user = await self._client.login(email, password)
        self.user = user
        logger.info("Logged in as %s (id=%s)", user.username, user.id)
        return user

    async def register(self, username: str, email: str, password: str) -> User:
        """Register a new account and make it the session user.

        Raises:
            RegistrationFailed: The session is left unchanged.
        """
        user = await self._client.register(username, email, password)
        self.user = user
        logger.info("Registered %s (id=%s)", user.username, user.id)
        return user

    def logout(self) -> None:
        if self.user is not None:
            logger.info("Logged out %s", self.user.username)
        self.user = None
