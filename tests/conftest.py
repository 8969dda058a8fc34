import pytest
from fastapi.testclient import TestClient

from todo_api.main import create_app
from todo_api.repositories import InMemoryTodoRepository
from todo_api.settings import Settings


@pytest.fixture
def settings():
    return Settings(log_level="WARNING")


@pytest.fixture
def store():
    return InMemoryTodoRepository()


@pytest.fixture
def app(store, settings):
    return create_app(store=store, settings=settings)


@pytest.fixture
def client(app):
    return TestClient(app)
