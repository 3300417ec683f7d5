"""Base in-memory repository with generic storage and locking."""
import copy
import threading
from typing import Generic, Iterable, TypeVar

from spendcat.core.ids import IdFactory, new_id

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Generic repository holding entities in an insertion-ordered dict.

    Subclasses run every validate-then-mutate sequence while holding
    ``self._lock``. Entities leave the repository only as deep copies.
    """

    def __init__(self, items: Iterable[T] | None = None, id_factory: IdFactory = new_id):
        self._lock = threading.RLock()
        self._items: dict[str, T] = {}
        self._new_id = id_factory
        for item in items or ():
            self._items[item.id] = copy.deepcopy(item)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def exists(self, id: str) -> bool:
        """Check whether an entity with this ID is stored."""
        with self._lock:
            return id in self._items

    def _snapshot(self) -> list[T]:
        """Copies of all entities, in insertion order."""
        with self._lock:
            return [copy.deepcopy(item) for item in self._items.values()]

    def _insert(self, item: T) -> T:
        self._items[item.id] = item
        return copy.deepcopy(item)

    def _delete(self, id: str) -> None:
        del self._items[id]
