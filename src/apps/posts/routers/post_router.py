"""Post router."""

from fastapi import Request

from src.core.bases.base_router import BaseRouter
from src.apps.posts.repositories.post_repository import PostRepository
from src.apps.posts.services.post_service import PostService
from src.apps.posts.schemas.post import CreatePostRequest, UpdatePostRequest


def get_post_repository(request: Request) -> PostRepository:
    """Get the store shared by the running app."""
    return request.app.state.post_store


def get_post_service(request: Request) -> PostService:
    """Get post service instance."""
    return PostService(get_post_repository(request))


class PostRouter(BaseRouter):
    """Post router class."""

    list_path = "/posts"
    get_path = "/post/{item_id}"
    create_path = "/addPost"
    update_path = "/updatePost"
    delete_path = "/deletePost/{item_id}"

    def __init__(self):
        super().__init__(
            service_dependency=get_post_service,
            create_schema=CreatePostRequest,
            update_schema=UpdatePostRequest,
            tags=["Posts"],
        )


# Router instance
router = PostRouter().get_router()
