"""Post service."""

from src.core.bases.base_service import BaseService
from src.core.response.schemas import PostDbResponse
from src.apps.posts.models.post import Post
from src.apps.posts.repositories.post_repository import PostRepository
from src.apps.posts.schemas.post import CreatePostRequest, UpdatePostRequest


class PostService(BaseService[Post]):
    """Post service class.

    Each method takes the store lock once and calls exactly one store
    operation. On lock failure the fallback payload is ``0`` for create,
    ``[]`` for the listing and ``None`` otherwise.
    """

    repository: PostRepository

    def __init__(self, repository: PostRepository):
        super().__init__(repository)

    def get_all(self) -> PostDbResponse:
        return self._execute(lambda db: PostDbResponse.ok(db.get_posts()), fallback=[])

    def get_by_id(self, item_id: int) -> PostDbResponse:
        return self._execute(lambda db: db.get_post(item_id))

    def create(self, item_data: CreatePostRequest) -> PostDbResponse:
        return self._execute(lambda db: db.create_post(item_data.content), fallback=0)

    def update(self, item_data: UpdatePostRequest) -> PostDbResponse:
        return self._execute(
            lambda db: db.update_post(item_data.post_id, item_data.updated_content)
        )

    def delete(self, item_id: int) -> PostDbResponse:
        return self._execute(lambda db: db.delete_post(item_id))
