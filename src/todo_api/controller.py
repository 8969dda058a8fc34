from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import structlog

from .repositories import TodoStore
from .schemas import TodoCreate, TodoOut, TodoUpdate

log = structlog.get_logger(__name__)

NOT_FOUND_DETAIL = "Todo not found"
MISSING_BODY_DETAIL = "Request body is required"


class OutcomeKind(Enum):
    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    NOT_FOUND = 404


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class Outcome:
    """
    Result of a controller operation: a kind that maps onto an HTTP status,
    plus either a payload (success) or a detail message (failure).
    """

    kind: OutcomeKind
    payload: Any = None
    detail: Optional[str] = None

    @property
    def status_code(self) -> int:
        return self.kind.value

    @property
    def is_error(self) -> bool:
        return self.kind in (OutcomeKind.BAD_REQUEST, OutcomeKind.NOT_FOUND)

    @classmethod
    def ok(cls, payload: Any = None) -> "Outcome":
        return cls(OutcomeKind.OK, payload=payload)

    @classmethod
    def created(cls, payload: Any) -> "Outcome":
        return cls(OutcomeKind.CREATED, payload=payload)

    @classmethod
    def not_found(cls, detail: str = NOT_FOUND_DETAIL) -> "Outcome":
        return cls(OutcomeKind.NOT_FOUND, detail=detail)

    @classmethod
    def bad_request(cls, detail: str) -> "Outcome":
        return cls(OutcomeKind.BAD_REQUEST, detail=detail)


# PUBLIC_INTERFACE
class TodoController:
    """Translates todo requests into store calls and store results into outcomes."""

    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def list_todos(self) -> Outcome:
        return Outcome.ok([TodoOut(**t) for t in self._store.get_all()])

    def get_todo(self, todo_id: int) -> Outcome:
        item = self._store.find_by_id(todo_id)
        if item is None:
            log.info("todo not found", todo_id=todo_id)
            return Outcome.not_found()
        return Outcome.ok(TodoOut(**item))

    def create_todo(self, payload: TodoCreate) -> Outcome:
        created = self._store.save(payload)
        return Outcome.created(TodoOut(**created))

    def update_todo(self, todo_id: int, payload: Optional[TodoUpdate]) -> Outcome:
        # A missing or null body is rejected before the id is looked up.
        if payload is None:
            log.warning("update rejected, missing body", todo_id=todo_id)
            return Outcome.bad_request(MISSING_BODY_DETAIL)
        updated = self._store.update(todo_id, payload)
        if updated is None:
            log.info("todo not found", todo_id=todo_id)
            return Outcome.not_found()
        return Outcome.ok(TodoOut(**updated))

    def delete_todo(self, todo_id: int) -> Outcome:
        if not self._store.delete_by_id(todo_id):
            log.info("todo not found", todo_id=todo_id)
            return Outcome.not_found()
        return Outcome.ok()
