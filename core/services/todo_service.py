# =============================================================================
# core/services/todo_service.py - Todo Business Logic
# =============================================================================
# Handles todo CRUD operations and business logic.
# Separates HTTP concerns from database logic: validation happens here,
# before the store is touched, and "no row" results become 404 errors.
# =============================================================================

import logging
from typing import Any

from app.exceptions import TodoNotFoundError, TodoValidationError
from core.models.todo import TodoCreate, TodoUpdate
from lib.todo_store import TodoStore

logger = logging.getLogger(__name__)


class TodoService:
    """
    Service for todo operations.

    Provides a clean interface between API routes and the store.
    Store failures (StoreError) propagate unchanged to the caller.
    """

    def __init__(self, store: TodoStore):
        self.store = store

    def list_todos(self) -> list[dict[str, Any]]:
        """
        List every todo, newest first.

        Returns:
            List of todo dicts (possibly empty)
        """
        return self.store.list_all()

    def get_todo(self, todo_id: int) -> dict[str, Any]:
        """
        Get a todo by ID.

        Raises:
            TodoNotFoundError: If no todo has this ID
        """
        todo = self.store.get(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo

    def create_todo(self, request: TodoCreate | None) -> dict[str, Any]:
        """
        Create a new todo.

        Args:
            request: Create payload; None when the body was empty

        Returns:
            Created todo dict with id, created_at and completed=false

        Raises:
            TodoValidationError: If text is missing or empty (nothing is written)
        """
        if request is None or not request.text:
            raise TodoValidationError("Text is required")

        return self.store.insert(request.text)

    def update_todo(self, todo_id: int, request: TodoUpdate | None) -> dict[str, Any]:
        """
        Merge-update a todo.

        Fields that are absent from the request keep their stored value.
        An empty body leaves the row as it is and returns it.

        Raises:
            TodoValidationError: If text is given but empty (nothing is written)
            TodoNotFoundError: If no todo has this ID
        """
        request = request or TodoUpdate()

        if request.text is not None and request.text == "":
            raise TodoValidationError("Text cannot be empty")

        todo = self.store.update(
            todo_id,
            text=request.text,
            completed=request.completed,
        )
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo

    def delete_todo(self, todo_id: int) -> dict[str, Any]:
        """
        Permanently delete a todo.

        Returns:
            The deleted todo dict

        Raises:
            TodoNotFoundError: If no todo has this ID
        """
        todo = self.store.delete(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo
