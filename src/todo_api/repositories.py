from __future__ import annotations

from abc import ABC, abstractmethod
from threading import RLock
from typing import Dict, List, Optional

import structlog

from .models import TodoEntity
from .schemas import TodoCreate, TodoUpdate

log = structlog.get_logger(__name__)


# PUBLIC_INTERFACE
class TodoStore(ABC):
    """Abstract storage contract for todo items."""

    @abstractmethod
    def get_all(self) -> List[TodoEntity]:
        """Return every TodoEntity in insertion order."""

    @abstractmethod
    def find_by_id(self, todo_id: int) -> Optional[TodoEntity]:
        """Return a TodoEntity by id, or None if not found."""

    @abstractmethod
    def save(self, data: TodoCreate) -> TodoEntity:
        """Store a new TodoEntity, assigning an id when none is given, and return it."""

    @abstractmethod
    def update(self, todo_id: int, data: TodoUpdate) -> Optional[TodoEntity]:
        """Overwrite fields of an existing TodoEntity. Return updated entity or None if not found."""

    @abstractmethod
    def delete_by_id(self, todo_id: int) -> bool:
        """Delete a TodoEntity by id. Return True if deleted, False if not found."""


class InMemoryTodoRepository(TodoStore):
    """
    Thread-safe in-memory store. One instance lives for the lifetime of the
    application that owns it.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: Dict[int, TodoEntity] = {}
        self._next_id = 1

    def _allocate_id(self, requested: Optional[int]) -> int:
        with self._lock:
            if requested is not None and requested not in self._items:
                self._next_id = max(self._next_id, requested + 1)
                return requested
            while self._next_id in self._items:
                self._next_id += 1
            i = self._next_id
            self._next_id += 1
            return i

    def get_all(self) -> List[TodoEntity]:
        with self._lock:
            return [t.copy() for t in self._items.values()]

    def find_by_id(self, todo_id: int) -> Optional[TodoEntity]:
        with self._lock:
            item = self._items.get(todo_id)
            return None if item is None else item.copy()

    def save(self, data: TodoCreate) -> TodoEntity:
        with self._lock:
            entity: TodoEntity = {
                "id": self._allocate_id(data.id),
                "title": data.title,
                "completed": data.completed,
                "order": data.order,
            }
            self._items[entity["id"]] = entity
        if data.id is not None and data.id != entity["id"]:
            log.info("todo id already taken, assigned a new one", requested_id=data.id, todo_id=entity["id"])
        log.info("todo saved", todo_id=entity["id"])
        return entity.copy()

    def update(self, todo_id: int, data: TodoUpdate) -> Optional[TodoEntity]:
        with self._lock:
            existing = self._items.get(todo_id)
            if existing is None:
                return None

            updated = existing.copy()
            updated.update(data.changes())  # type: ignore[typeddict-item]
            self._items[todo_id] = updated
        log.info("todo updated", todo_id=todo_id)
        return updated.copy()

    def delete_by_id(self, todo_id: int) -> bool:
        with self._lock:
            removed = self._items.pop(todo_id, None) is not None
        if removed:
            log.info("todo deleted", todo_id=todo_id)
        return removed
