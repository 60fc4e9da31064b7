"""HTTP client for the post API.

Every call returns the same ``PostDbResponse`` envelope the server built:
a 200 answer becomes ``Ok`` and a 417 answer becomes ``Err``, each carrying
the decoded JSON body. Any other status, or a transport failure, raises
``ClientException``.
"""

import logging
from typing import Any, Callable, List, Optional

import httpx

from src.core.config import settings
from src.core.exceptions import ClientException
from src.core.response.handlers import FAILURE_STATUS, SUCCESS_STATUS
from src.core.response.schemas import PostDbResponse
from src.apps.posts.models.post import Post

logger = logging.getLogger(__name__)


class PostClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url or settings.API_URL
        self.http = http_client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def __enter__(self) -> "PostClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    def get_posts(self) -> PostDbResponse[List[Post]]:
        return self._request("GET", "/posts", parse=_parse_posts)

    def get_post(self, post_id: int) -> PostDbResponse[Optional[Post]]:
        return self._request("GET", f"/post/{post_id}", parse=_parse_post)

    def add_post(self, content: str) -> PostDbResponse[int]:
        return self._request("POST", "/addPost", json={"content": content})

    def update_post(self, post_id: int, content: str) -> PostDbResponse[Optional[int]]:
        return self._request(
            "POST",
            "/updatePost",
            json={"post_id": post_id, "updated_content": content},
        )

    def delete_post(self, post_id: int) -> PostDbResponse[Optional[int]]:
        return self._request("POST", f"/deletePost/{post_id}")

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[dict] = None,
        parse: Optional[Callable[[Any], Any]] = None,
    ) -> PostDbResponse:
        try:
            response = self.http.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error("Request %s %s failed: %s", method, path, e)
            raise ClientException(f"Could not reach post server: {e}") from e

        if response.status_code not in (SUCCESS_STATUS, FAILURE_STATUS):
            raise ClientException(
                f"Unexpected status {response.status_code} from {method} {path}: {response.text}",
                status_code=response.status_code,
            )

        try:
            value = response.json()
        except ValueError as e:
            raise ClientException(
                f"Malformed JSON body from {method} {path}", status_code=response.status_code
            ) from e

        if response.status_code == FAILURE_STATUS:
            return PostDbResponse.err(value)
        return PostDbResponse.ok(parse(value) if parse else value)


def _parse_posts(value: Any) -> List[Post]:
    return [Post.model_validate(item) for item in value]


def _parse_post(value: Any) -> Optional[Post]:
    return Post.model_validate(value) if value is not None else None
