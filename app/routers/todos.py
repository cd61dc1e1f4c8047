# =============================================================================
# app/routers/todos.py - Todo CRUD Endpoints
# =============================================================================
# Handles listing, creating, updating and deleting todos.
#
# Handlers are plain `def` functions: FastAPI runs them in its threadpool,
# so each request holds one pooled connection for one statement and
# requests never block each other beyond the pool size.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, status

from app.dependencies import TodoServiceDep
from core.models.todo import ErrorResponse, Todo, TodoCreate, TodoDeleted, TodoUpdate

router = APIRouter()

TodoId = Annotated[int, Path(description="Todo ID")]

# Error bodies documented on every endpoint that touches the store
_STORE_ERRORS = {500: {"model": ErrorResponse, "description": "Store failure"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Todo not found"}}


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[Todo], responses=_STORE_ERRORS)
def list_todos(service: TodoServiceDep):
    """
    List all todos.

    Returns every todo ordered by creation time, newest first.
    """
    return service.list_todos()


@router.post(
    "",
    response_model=Todo,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Text is required"}, **_STORE_ERRORS},
)
def create_todo(service: TodoServiceDep, request: TodoCreate | None = None):
    """
    Create a new todo.

    The server assigns id and created_at; completed starts as false.
    """
    return service.create_todo(request)


@router.get("/{todo_id}", response_model=Todo, responses={**_NOT_FOUND, **_STORE_ERRORS})
def get_todo(todo_id: TodoId, service: TodoServiceDep):
    """Get a single todo."""
    return service.get_todo(todo_id)


@router.put("/{todo_id}", response_model=Todo, responses={**_NOT_FOUND, **_STORE_ERRORS})
def update_todo(
    todo_id: TodoId,
    service: TodoServiceDep,
    request: TodoUpdate | None = None,
):
    """
    Update a todo.

    Only the fields present in the body are changed, so a client can toggle
    `completed` without resending `text` (and vice versa).
    """
    return service.update_todo(todo_id, request)


@router.delete("/{todo_id}", response_model=TodoDeleted, responses={**_NOT_FOUND, **_STORE_ERRORS})
def delete_todo(todo_id: TodoId, service: TodoServiceDep):
    """
    Delete a todo.

    This is a hard delete; the id is never reused.
    """
    service.delete_todo(todo_id)
    return TodoDeleted()
