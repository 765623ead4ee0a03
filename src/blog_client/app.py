"""View orchestrator for the blog client.

``BlogApp`` owns the service client and every state container, dispatches
user actions to the service client and applies each successful result to the
relevant state. ``render`` turns the current state into an immutable
``BlogView`` that a presentation layer can draw without touching the
containers.

Every action catches its own service failure. Only the initial post load is
surfaced to the user (``BlogView.posts_error``); the rest are logged and leave
modals and form buffers as they were.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from types import TracebackType

from blog_client.schemas import Comment, Post, User
from blog_client.services.client import (
    CommentCreateFailed,
    CommentsUnavailable,
    PostCreateFailed,
    PostDeleteFailed,
    PostsUnavailable,
    RegistrationFailed,
    ServiceClient,
    UserNotFound,
)
from blog_client.state import Action, CommentThread, Modal, PostCollection, SessionState, UiState

# Configure logger for this module
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostView:
    """A post as shown in the list."""

    post: Post
    selected: bool
    can_delete: bool


@dataclass(frozen=True)
class BlogView:
    """Snapshot of everything the presentation layer draws."""

    user: User | None
    posts: tuple[PostView, ...]
    posts_loading: bool
    posts_error: bool
    selected_post: Post | None
    comments: tuple[Comment, ...]
    modal: Modal | None
    login_email: str
    register_username: str
    register_email: str
    post_title: str
    post_content: str
    comment_text: str
    can_submit_login: bool
    can_submit_register: bool
    can_submit_post: bool
    can_submit_comment: bool
    can_submit_delete: bool

    @property
    def show_comment_form(self) -> bool:
        return self.user is not None and self.selected_post is not None


class BlogApp:
    """Owns the blog state and dispatches user actions."""

    def __init__(self, client: ServiceClient | None = None) -> None:
        self.client = client or ServiceClient()
        self.session = SessionState(self.client)
        self.posts = PostCollection(self.client)
        self.comments = CommentThread(self.client)
        self.ui = UiState()

    async def __aenter__(self) -> BlogApp:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.client.close()

    def _busy(self, action: Action) -> bool:
        if action in self.ui.pending:
            logger.info("%s rejected: already in flight", action.value)
            return True
        return False

    @contextmanager
    def _in_flight(self, action: Action) -> Iterator[None]:
        self.ui.pending.add(action)
        try:
            yield
        finally:
            self.ui.pending.discard(action)

    async def start(self) -> None:
        """Load the post list once."""
        try:
            await self.posts.load()
        except PostsUnavailable as exc:
            logger.error("Error loading posts: %s", exc)

    def open_modal(self, modal: Modal) -> None:
        self.ui.open(modal)

    def close_modal(self) -> None:
        self.ui.close()

    def set_login_form(self, *, email: str | None = None, password: str | None = None) -> None:
        form = self.ui.login_form
        if email is not None:
            form.email = email
        if password is not None:
            form.password = password

    def set_register_form(
        self,
        *,
        username: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> None:
        form = self.ui.register_form
        if username is not None:
            form.username = username
        if email is not None:
            form.email = email
        if password is not None:
            form.password = password

    def set_post_form(self, *, title: str | None = None, content: str | None = None) -> None:
        form = self.ui.post_form
        if title is not None:
            form.title = title
        if content is not None:
            form.content = content

    def set_comment_text(self, text: str) -> None:
        self.ui.comment_text = text

    async def submit_login(self) -> None:
        if self._busy(Action.LOGIN):
            return
        form = self.ui.login_form
        with self._in_flight(Action.LOGIN):
            try:
                await self.session.login(form.email, form.password)
            except UserNotFound as exc:
                logger.warning("Login error: %s", exc)
                return
        self.ui.close()
        self.ui.reset_login()

    async def submit_register(self) -> None:
        if self._busy(Action.REGISTER):
            return
        form = self.ui.register_form
        with self._in_flight(Action.REGISTER):
            try:
                await self.session.register(form.username, form.email, form.password)
            except RegistrationFailed as exc:
                logger.warning("Registration error: %s", exc)
                return
        self.ui.close()
        self.ui.reset_register()

    def logout(self) -> None:
        self.session.logout()

    async def submit_post(self) -> None:
        user = self.session.user
        form = self.ui.post_form
        if user is None:
            logger.info("Post rejected: not logged in")
            return
        if not form.title.strip() or not form.content.strip():
            logger.info("Post rejected: title and content are required")
            return
        if self._busy(Action.CREATE_POST):
            return
        with self._in_flight(Action.CREATE_POST):
            try:
                await self.posts.create(form.title, form.content, user)
            except PostCreateFailed as exc:
                logger.warning("Error creating post: %s", exc)
                return
        self.ui.close()
        self.ui.reset_post()

    async def delete_post(self, post_id: int) -> None:
        user = self.session.user
        if user is None:
            logger.info("Delete rejected: not logged in")
            return
        if self._busy(Action.DELETE_POST):
            return
        with self._in_flight(Action.DELETE_POST):
            try:
                deleted = await self.posts.delete(post_id, user)
            except PostDeleteFailed as exc:
                logger.warning("Error deleting post %s: %s", post_id, exc)
                return
        if deleted:
            self.comments.clear_if_selected(post_id)

    async def select_post(self, post: Post) -> None:
        try:
            await self.comments.select(post)
        except CommentsUnavailable as exc:
            logger.warning("Error loading comments for post %s: %s", post.id, exc)

    async def submit_comment(self) -> None:
        if self._busy(Action.CREATE_COMMENT):
            return
        with self._in_flight(Action.CREATE_COMMENT):
            try:
                comment = await self.comments.create(self.ui.comment_text, self.session.user)
            except CommentCreateFailed as exc:
                logger.warning("Error creating comment: %s", exc)
                return
        if comment is not None:
            self.ui.comment_text = ""

    def render(self) -> BlogView:
        ui = self.ui
        selected_id = self.comments.selected_id
        return BlogView(
            user=self.session.user,
            posts=tuple(
                PostView(
                    post=post,
                    selected=post.id == selected_id,
                    can_delete=self.session.can_delete(post),
                )
                for post in self.posts.items
            ),
            posts_loading=self.posts.loading,
            posts_error=self.posts.error,
            selected_post=self.comments.selected,
            comments=tuple(self.comments.items),
            modal=ui.modal,
            login_email=ui.login_form.email,
            register_username=ui.register_form.username,
            register_email=ui.register_form.email,
            post_title=ui.post_form.title,
            post_content=ui.post_form.content,
            comment_text=ui.comment_text,
            can_submit_login=Action.LOGIN not in ui.pending,
            can_submit_register=Action.REGISTER not in ui.pending,
            can_submit_post=Action.CREATE_POST not in ui.pending,
            can_submit_comment=(
                Action.CREATE_COMMENT not in ui.pending and bool(ui.comment_text.strip())
            ),
            can_submit_delete=Action.DELETE_POST not in ui.pending,
        )


__all__ = ["BlogApp", "BlogView", "PostView"]
