import logging
from typing import Any, Callable, Generic, TypeVar

from sqlmodel import SQLModel

from src.core.bases.base_repository import BaseRepository
from src.core.exceptions import StoreLockError
from src.core.response.schemas import PostDbResponse

T = TypeVar("T", bound=SQLModel)

logger = logging.getLogger(__name__)


class BaseService(Generic[T]):
    """Runs one repository operation per call under the repository session."""

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository

    def _execute(
        self,
        operation: Callable[[Any], PostDbResponse],
        fallback: Any = None,
    ) -> PostDbResponse:
        """Run ``operation`` with exclusive access to the repository.

        A lock failure never propagates: it is logged and turned into an
        ``Err`` envelope carrying ``fallback``.
        """
        try:
            with self.repository.session() as db:
                return operation(db)
        except StoreLockError as e:
            logger.error("Error getting store lock: %s", e.detail)
            return PostDbResponse.err(fallback)

    def get_all(self) -> PostDbResponse:
        raise NotImplementedError

    def get_by_id(self, item_id: int) -> PostDbResponse:
        raise NotImplementedError

    def create(self, item_data: Any) -> PostDbResponse:
        raise NotImplementedError

    def update(self, item_data: Any) -> PostDbResponse:
        raise NotImplementedError

    def delete(self, item_id: int) -> PostDbResponse:
        raise NotImplementedError
