# =============================================================================
# client/state.py - Todo List State and Transitions
# =============================================================================
# The client-side view of the todo list, modelled as an immutable state
# object plus pure transition functions. Each transition takes the previous
# state and a server result (or failure) and returns the next state, so the
# list logic can be tested without a renderer or a network.
#
# Rules:
# - The task list only changes after the server confirms an operation.
# - The draft (input field text) is the only optimistic state.
# - The error message is cleared when an operation starts and set when it
#   fails; a failure never touches the list.
#
# Usage:
#   state = initial_state()
#   state = begin_operation(state)
#   state = fetch_succeeded(state, todos)
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field, replace

from core.models.todo import Todo

# User-facing messages, one per operation
FETCH_ERROR = "Failed to fetch tasks. Please try again later."
ADD_ERROR = "Failed to add task. Please try again."
TOGGLE_ERROR = "Failed to update task. Please try again."
DELETE_ERROR = "Failed to delete task. Please try again."


@dataclass(frozen=True)
class TodoListState:
    """
    Snapshot of the client's todo list.

    Attributes:
        tasks: Todos in server order (newest first)
        loading: True only while the initial fetch is in flight
        error: Message from the last failed operation, or None
        draft: Current contents of the "new task" input
    """
    tasks: tuple[Todo, ...] = field(default_factory=tuple)
    loading: bool = True
    error: str | None = None
    draft: str = ""

    @property
    def total_count(self) -> int:
        return len(self.tasks)

    @property
    def completed_count(self) -> int:
        return sum(1 for task in self.tasks if task.completed)

    @property
    def progress_percent(self) -> int:
        """Completed share of all tasks, rounded to a whole percent (0 when empty)."""
        if not self.tasks:
            return 0
        return round(self.completed_count / self.total_count * 100)

    def find(self, todo_id: int) -> Todo | None:
        """Return the task with this id, if it's in the list."""
        for task in self.tasks:
            if task.id == todo_id:
                return task
        return None


def initial_state() -> TodoListState:
    """State before the first fetch: empty list, loading."""
    return TodoListState()


def begin_operation(state: TodoListState) -> TodoListState:
    """Clear the previous error as a new operation starts."""
    return replace(state, error=None)


def set_draft(state: TodoListState, text: str) -> TodoListState:
    return replace(state, draft=text)


# -----------------------------------------------------------------------------
# Fetch
# -----------------------------------------------------------------------------

def fetch_succeeded(state: TodoListState, tasks: list[Todo]) -> TodoListState:
    return replace(state, tasks=tuple(tasks), loading=False)


def fetch_failed(state: TodoListState, message: str = FETCH_ERROR) -> TodoListState:
    """Keep whatever was already loaded; on the initial fetch that is nothing."""
    return replace(state, loading=False, error=message)


# -----------------------------------------------------------------------------
# Add
# -----------------------------------------------------------------------------

def add_succeeded(state: TodoListState, task: Todo) -> TodoListState:
    """
    Prepend the created task and clear the draft.

    New tasks have the latest created_at, so prepending keeps the list in
    the same order the server would return it.
    """
    return replace(state, tasks=(task, *state.tasks), draft="")


def add_failed(state: TodoListState, message: str = ADD_ERROR) -> TodoListState:
    """Keep the draft so the user can retry."""
    return replace(state, error=message)


# -----------------------------------------------------------------------------
# Toggle
# -----------------------------------------------------------------------------

def toggle_succeeded(state: TodoListState, task: Todo) -> TodoListState:
    """Replace the task with the server's copy."""
    tasks = tuple(task if existing.id == task.id else existing for existing in state.tasks)
    return replace(state, tasks=tasks)


def toggle_failed(state: TodoListState, message: str = TOGGLE_ERROR) -> TodoListState:
    return replace(state, error=message)


# -----------------------------------------------------------------------------
# Delete
# -----------------------------------------------------------------------------

def delete_succeeded(state: TodoListState, todo_id: int) -> TodoListState:
    tasks = tuple(task for task in state.tasks if task.id != todo_id)
    return replace(state, tasks=tasks)


def delete_failed(state: TodoListState, message: str = DELETE_ERROR) -> TodoListState:
    return replace(state, error=message)
