"""Post repository."""

import logging
from typing import List, Optional

from src.core.bases.base_repository import BaseRepository
from src.core.response.schemas import PostDbResponse
from src.apps.posts.models.post import Post

logger = logging.getLogger(__name__)


class PostRepository(BaseRepository[Post]):
    """The authoritative post store.

    Posts keep insertion order. Lookups are linear scans; callers only ever
    receive copies, so the stored posts change solely through this class.
    """

    model = Post
    id_field = "post_id"

    def get_posts(self) -> List[Post]:
        """Snapshot of every post in insertion order."""
        with self.lock:
            return [post.model_copy() for post in self.items]

    def get_post(self, post_id: int) -> PostDbResponse[Optional[Post]]:
        with self.lock:
            index = self._find_index(post_id)
            if index is None:
                logger.debug("Post %s not found", post_id)
                return PostDbResponse.err(None)
            return PostDbResponse.ok(self.items[index].model_copy())

    def create_post(self, content: str) -> PostDbResponse[int]:
        with self.lock:
            post_id = self._next_id()
            self.items.append(Post(post_id=post_id, content=content))
            logger.info("Created post %s", post_id)
            return PostDbResponse.ok(post_id)

    def update_post(self, post_id: int, updated_content: str) -> PostDbResponse[Optional[int]]:
        with self.lock:
            index = self._find_index(post_id)
            if index is None:
                logger.debug("Post %s not found for update", post_id)
                return PostDbResponse.err(None)
            self.items[index].content = updated_content
            logger.info("Updated post %s", post_id)
            return PostDbResponse.ok(post_id)

    def delete_post(self, post_id: int) -> PostDbResponse[Optional[int]]:
        with self.lock:
            index = self._find_index(post_id)
            if index is None:
                logger.debug("Post %s not found for delete", post_id)
                return PostDbResponse.err(None)
            removed = self.items.pop(index)
            logger.info("Deleted post %s", removed.post_id)
            return PostDbResponse.ok(removed.post_id)
