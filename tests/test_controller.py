from typing import List, Optional

from fastapi.testclient import TestClient

from todo_api.controller import Outcome, OutcomeKind, TodoController
from todo_api.main import create_app
from todo_api.models import TodoEntity
from todo_api.repositories import TodoStore
from todo_api.schemas import TodoCreate, TodoOut, TodoUpdate


class StubTodoStore(TodoStore):
    """Store holding a fixed set of todos and recording every call."""

    def __init__(self, *todos: TodoEntity) -> None:
        self.todos = {t["id"]: dict(t) for t in todos}
        self.calls: List[tuple] = []

    def get_all(self) -> List[TodoEntity]:
        self.calls.append(("get_all",))
        return list(self.todos.values())

    def find_by_id(self, todo_id: int) -> Optional[TodoEntity]:
        self.calls.append(("find_by_id", todo_id))
        return self.todos.get(todo_id)

    def save(self, data: TodoCreate) -> TodoEntity:
        self.calls.append(("save", data))
        entity = {"id": data.id or 100, "title": data.title, "completed": data.completed, "order": data.order}
        self.todos[entity["id"]] = entity
        return entity

    def update(self, todo_id: int, data: TodoUpdate) -> Optional[TodoEntity]:
        self.calls.append(("update", todo_id, data))
        if todo_id not in self.todos:
            return None
        self.todos[todo_id].update(data.changes())
        return self.todos[todo_id]

    def delete_by_id(self, todo_id: int) -> bool:
        self.calls.append(("delete_by_id", todo_id))
        return self.todos.pop(todo_id, None) is not None


ONE = {"id": 1, "title": "title", "completed": True, "order": 1}


class TestOutcome:
    def test_status_codes(self):
        assert Outcome.ok([]).status_code == 200
        assert Outcome.created({}).status_code == 201
        assert Outcome.bad_request("x").status_code == 400
        assert Outcome.not_found().status_code == 404

    def test_error_kinds(self):
        assert Outcome.not_found().is_error
        assert Outcome.bad_request("x").is_error
        assert not Outcome.ok().is_error
        assert Outcome.not_found().detail == "Todo not found"


class TestTodoController:
    def test_list_empty(self):
        outcome = TodoController(StubTodoStore()).list_todos()
        assert outcome.kind is OutcomeKind.OK
        assert outcome.payload == []

    def test_get_found(self):
        outcome = TodoController(StubTodoStore(ONE)).get_todo(1)
        assert outcome.kind is OutcomeKind.OK
        assert outcome.payload == TodoOut(**ONE)

    def test_get_not_found(self):
        store = StubTodoStore(ONE)
        outcome = TodoController(store).get_todo(2)
        assert outcome.kind is OutcomeKind.NOT_FOUND
        assert store.calls == [("find_by_id", 2)]

    def test_create(self):
        store = StubTodoStore()
        outcome = TodoController(store).create_todo(TodoCreate(title="title", completed=True, order=1))
        assert outcome.kind is OutcomeKind.CREATED
        assert outcome.payload.title == "title"
        assert outcome.payload.id == 100
        assert store.calls[0][0] == "save"

    def test_update(self):
        payload = TodoUpdate(id=2, title="updated title", completed=True, order=1)
        outcome = TodoController(StubTodoStore(ONE)).update_todo(1, payload)
        assert outcome.kind is OutcomeKind.OK
        assert outcome.payload.id == 1
        assert outcome.payload.title == "updated title"

    def test_update_not_found(self):
        outcome = TodoController(StubTodoStore(ONE)).update_todo(2, TodoUpdate(title="updated title"))
        assert outcome.kind is OutcomeKind.NOT_FOUND

    def test_update_without_body_never_touches_store(self):
        store = StubTodoStore(ONE)
        outcome = TodoController(store).update_todo(1, None)
        assert outcome.kind is OutcomeKind.BAD_REQUEST
        assert outcome.detail == "Request body is required"
        assert store.calls == []

    def test_delete(self):
        store = StubTodoStore(ONE)
        outcome = TodoController(store).delete_todo(1)
        assert outcome.kind is OutcomeKind.OK
        assert outcome.payload is None
        assert store.todos == {}

    def test_delete_not_found(self):
        outcome = TodoController(StubTodoStore(ONE)).delete_todo(2)
        assert outcome.kind is OutcomeKind.NOT_FOUND


class TestSubstitutedStoreOverHttp:
    def test_app_uses_given_store(self, settings):
        store = StubTodoStore(ONE)
        client = TestClient(create_app(store=store, settings=settings))

        res = client.get("/todos/1")
        assert res.status_code == 200
        assert res.json() == ONE
        assert client.get("/todos/2").status_code == 404
        assert store.calls == [("find_by_id", 1), ("find_by_id", 2)]
