# =============================================================================
# client/ - Todo API Client Package
# =============================================================================
# The consuming side of the Todo API:
# - api.py: httpx client for the HTTP endpoints
# - state.py: Immutable list state and pure transition functions
# - controller.py: Applies transitions around API calls
#
# Nothing here renders anything; scripts/todo_interactive.py is a terminal
# front end built on top of the controller.
# =============================================================================

from client.api import DEFAULT_API_URL, TodoApiClient, TodoApiError
from client.controller import TodoController
from client.state import TodoListState, initial_state

__all__ = [
    "DEFAULT_API_URL",
    "TodoApiClient",
    "TodoApiError",
    "TodoController",
    "TodoListState",
    "initial_state",
]
