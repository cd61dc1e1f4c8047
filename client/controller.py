# =============================================================================
# client/controller.py - Todo List Controller
# =============================================================================
# Drives the pure transitions in client/state.py with calls to the Todo API.
# The server is the source of truth: the list only changes once a request
# succeeds, and a failed request leaves the previous list in place with an
# error message set.
#
# Usage:
#   controller = TodoController(TodoApiClient(api_url))
#   controller.load()
#   controller.set_draft("Buy milk")
#   controller.add()
# =============================================================================

import logging

from client import state as transitions
from client.api import TodoApiClient, TodoApiError
from client.state import TodoListState
from lib.utils import is_blank

logger = logging.getLogger(__name__)


class TodoController:
    """
    Holds the current TodoListState and applies one transition per action.

    Actions run one at a time in the caller's thread; each makes at most
    one request.
    """

    def __init__(self, api: TodoApiClient):
        self.api = api
        self.state: TodoListState = transitions.initial_state()

    def load(self) -> TodoListState:
        """Initial fetch (what the UI does when it mounts)."""
        self.state = transitions.begin_operation(self.state)
        try:
            tasks = self.api.list_todos()
        except TodoApiError as e:
            logger.error(f"Error fetching tasks: {e}")
            self.state = transitions.fetch_failed(self.state)
        else:
            self.state = transitions.fetch_succeeded(self.state, tasks)
        return self.state

    def set_draft(self, text: str) -> TodoListState:
        self.state = transitions.set_draft(self.state, text)
        return self.state

    def add(self) -> TodoListState:
        """
        Create a task from the draft.

        A blank draft is ignored without a request. The draft is only cleared
        once the server has confirmed the new task.
        """
        if is_blank(self.state.draft):
            return self.state

        self.state = transitions.begin_operation(self.state)
        try:
            task = self.api.create_todo(self.state.draft.strip())
        except TodoApiError as e:
            logger.error(f"Error adding task: {e}")
            self.state = transitions.add_failed(self.state)
        else:
            self.state = transitions.add_succeeded(self.state, task)
        return self.state

    def toggle(self, todo_id: int) -> TodoListState:
        """Flip a task's completed flag and adopt the server's copy."""
        self.state = transitions.begin_operation(self.state)

        task = self.state.find(todo_id)
        if task is None:
            logger.error(f"Error updating task: {todo_id} is not in the list")
            self.state = transitions.toggle_failed(self.state)
            return self.state

        try:
            updated = self.api.update_todo(todo_id, completed=not task.completed)
        except TodoApiError as e:
            logger.error(f"Error updating task: {e}")
            self.state = transitions.toggle_failed(self.state)
        else:
            self.state = transitions.toggle_succeeded(self.state, updated)
        return self.state

    def delete(self, todo_id: int) -> TodoListState:
        self.state = transitions.begin_operation(self.state)
        try:
            self.api.delete_todo(todo_id)
        except TodoApiError as e:
            logger.error(f"Error deleting task: {e}")
            self.state = transitions.delete_failed(self.state)
        else:
            self.state = transitions.delete_succeeded(self.state, todo_id)
        return self.state
