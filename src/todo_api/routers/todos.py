from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from ..controller import Outcome, TodoController
from ..repositories import TodoStore
from ..schemas import TodoCreate, TodoOut, TodoUpdate

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)


def get_store(request: Request) -> TodoStore:
    """
    Return the store owned by the running application.
    """
    return request.app.state.store


def get_controller(store: TodoStore = Depends(get_store)) -> TodoController:
    return TodoController(store)


def render(outcome: Outcome) -> Response:
    """
    Turn a controller outcome into an HTTP response.
    """
    if outcome.is_error:
        return JSONResponse(status_code=outcome.status_code, content={"detail": outcome.detail})
    if outcome.payload is None:
        return Response(status_code=outcome.status_code)
    return JSONResponse(status_code=outcome.status_code, content=jsonable_encoder(outcome.payload))


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoOut],
    summary="List Todos",
    description="List every Todo item in insertion order.",
    responses={
        200: {"description": "List retrieved successfully"},
    },
)
def list_todos(controller: TodoController = Depends(get_controller)) -> Response:
    """
    List all todos.
    """
    return render(controller.list_todos())


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        404: {"description": "Todo not found"},
    },
)
def get_todo(todo_id: int, controller: TodoController = Depends(get_controller)) -> Response:
    """
    Retrieve a single Todo item by its ID.
    """
    return render(controller.get_todo(todo_id))


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item and return the stored resource, including its assigned id.",
    responses={
        201: {"description": "Todo created successfully"},
        400: {"description": "Malformed request body"},
    },
)
def create_todo(payload: TodoCreate, controller: TodoController = Depends(get_controller)) -> Response:
    """
    Create a new Todo.
    """
    return render(controller.create_todo(payload))


# PUBLIC_INTERFACE
@router.patch(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Update Todo",
    description=(
        "Overwrite the fields of a Todo item with the fields given in the body. "
        "Fields that are omitted or null keep their stored value."
    ),
    responses={
        200: {"description": "Todo updated"},
        400: {"description": "Missing or malformed request body"},
        404: {"description": "Todo not found"},
    },
)
def update_todo(
    todo_id: int,
    payload: Optional[TodoUpdate] = Body(default=None),
    controller: TodoController = Depends(get_controller),
) -> Response:
    """
    Update a Todo item. Returns 400 when no body is sent.
    """
    return render(controller.update_todo(todo_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete Todo",
    description="Delete a Todo item by ID.",
    responses={
        200: {"description": "Todo deleted"},
        404: {"description": "Todo not found"},
    },
)
def delete_todo(todo_id: int, controller: TodoController = Depends(get_controller)) -> Response:
    """
    Delete a Todo. Returns 200 with an empty body on success, 404 if not found.
    """
    return render(controller.delete_todo(todo_id))
