"""Comment thread state for the selected post."""

from __future__ import annotations

import logging

from blog_client.schemas import Comment, Post, User
from blog_client.services.client import ServiceClient

logger = logging.getLogger(__name__)


class CommentThread:
    """The selected post and its comments.

    Every load and create is tagged with the post id it was issued for. A
    result that arrives after the selection has moved on is dropped, so the
    thread never holds another post's comments.
    """

    def __init__(self, client: ServiceClient) -> None:
        self._client = client
        self.selected: Post | None = None
        self.items: list[Comment] = []

    @property
    def selected_id(self) -> int | None:
        return self.selected.id if self.selected is not None else None

    def _is_current(self, post_id: int) -> bool:
        return self.selected_id == post_id

    async def select(self, post: Post) -> list[Comment] | None:
        """Select ``post`` and load its comments."""
        self.selected = post
        return await self.load(post.id)

    async def load(self, post_id: int) -> list[Comment] | None:
        """Replace the thread with the comments of ``post_id``.

        Returns None when the response is discarded because the selection
        changed while it was in flight.

        Raises:
            CommentsUnavailable: The thread keeps whatever it held before.
        """
        comments = await self._client.list_comments(post_id)
        if not self._is_current(post_id):
            logger.debug(
                "Discarding comments for post %s; selection is now %s",
                post_id,
                self.selected_id,
            )
            return None
        self.items = list(comments)
        return self.items

    async def create(self, content: str, author: User | None) -> Comment | None:
        """Post a comment on the selected post.

        Nothing is sent when there is no author, no selection, or the content
        is blank. The new comment is appended only if its post is still
        selected when the service answers and a reload has not already
        brought it in.

        Raises:
            CommentCreateFailed: The thread is unchanged.
        """
        if author is None or self.selected is None or not content.strip():
            logger.info("Comment rejected: login, a selected post and text are required")
            return None
        post_id = self.selected.id
        comment = await self._client.create_comment(post_id, content, author.id)
        if not self._is_current(comment.post_id):
            logger.debug("Not appending comment %s; post %s is no longer selected", comment.id, post_id)
        elif any(item.id == comment.id for item in self.items):
            logger.debug("Comment %s already arrived with a reload", comment.id)
        else:
            self.items.append(comment)
        return comment

    def clear(self) -> None:
        self.selected = None
        self.items = []

    def clear_if_selected(self, post_id: int) -> bool:
        if not self._is_current(post_id):
            return False
        self.clear()
        return True
