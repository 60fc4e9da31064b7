import threading
from contextlib import contextmanager
from typing import Generic, Iterator, List, Optional, Type, TypeVar

from sqlmodel import SQLModel

from src.core.config import settings
from src.core.exceptions import StoreLockError

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """In-memory, insertion ordered collection guarded by one coarse lock.

    Subclasses set ``model`` and ``id_field``. Every public operation holds
    the lock for its whole body; ``session()`` lets a caller hold it across
    a call with a bounded wait.
    """

    model: Type[T]
    id_field: str = "id"

    def __init__(self, lock_timeout: Optional[float] = None):
        self.items: List[T] = []
        self.lock = threading.RLock()
        self.lock_timeout = (
            settings.STORE_LOCK_TIMEOUT if lock_timeout is None else lock_timeout
        )

    @contextmanager
    def session(self, timeout: Optional[float] = None) -> Iterator["BaseRepository[T]"]:
        """Hold exclusive access to the repository for the ``with`` block."""
        timeout = self.lock_timeout if timeout is None else timeout
        if not self.lock.acquire(timeout=timeout):
            raise StoreLockError(
                f"Could not acquire {self.model.__name__} store lock within {timeout}s",
                timeout=timeout,
            )
        try:
            yield self
        finally:
            self.lock.release()

    # ----------------- helpers ----------------- #
    def _item_id(self, item: T) -> int:
        return getattr(item, self.id_field)

    def _find_index(self, item_id: int) -> Optional[int]:
        for index, item in enumerate(self.items):
            if self._item_id(item) == item_id:
                return index
        return None

    def _next_id(self) -> int:
        """Candidate starts at count + 1 and walks up past any live id."""
        taken = {self._item_id(item) for item in self.items}
        candidate = len(self.items) + 1
        while candidate in taken:
            candidate += 1
        return candidate

    def count(self) -> int:
        with self.lock:
            return len(self.items)
