"""Post collection state: every post, newest first after local creates."""

from __future__ import annotations

import logging

from blog_client.schemas import Post, User
from blog_client.services.client import BlogServiceError, ServiceClient

logger = logging.getLogger(__name__)


class PostCollection:
    """Ordered list of posts mirrored from the post service.

    The list is fetched once by ``load``. Creates and deletes do not re-fetch;
    after the server confirms them the change is applied locally through
    ``apply_created`` and ``apply_deleted``.
    """

    def __init__(self, client: ServiceClient) -> None:
        self._client = client
        self.items: list[Post] = []
        self.loading = False
        self.error = False

    def get(self, post_id: int) -> Post | None:
        return next((post for post in self.items if post.id == post_id), None)

    async def load(self) -> list[Post]:
        """Replace the collection with the service's post list.

        Raises:
            PostsUnavailable: ``error`` is set and the collection is left empty.
        """
        self.loading = True
        self.error = False
        try:
            posts = await self._client.list_posts()
        except BlogServiceError:
            self.items = []
            self.error = True
            raise
        finally:
            self.loading = False
        self.items = list(posts)
        logger.debug("Loaded %d posts", len(self.items))
        return self.items

    async def create(self, title: str, content: str, author: User) -> Post:
        """Create a post as ``author`` and prepend it once the server accepts it.

        Raises:
            PostCreateFailed: The collection is unchanged.
        """
        post = await self._client.create_post(title, content, author.id)
        self.apply_created(post)
        return post

    async def delete(self, post_id: int, user: User) -> bool:
        """Delete a post authored by ``user``.

        Returns False without calling the service when the post is unknown or
        was written by someone else.

        Raises:
            PostDeleteFailed: The collection is unchanged.
        """
        post = self.get(post_id)
        if post is None or post.author_id != user.id:
            logger.info("User %s may not delete post %s", user.id, post_id)
            return False
        await self._client.delete_post(post_id)
        self.apply_deleted(post_id)
        return True

    def apply_created(self, post: Post) -> None:
        self.items.insert(0, post)

    def apply_deleted(self, post_id: int) -> None:
        self.items = [post for post in self.items if post.id != post_id]
