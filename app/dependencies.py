# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The Database (and its connection pool) is created once in the app lifespan
# and kept on app.state; handlers only borrow it.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.todo_service import TodoService
from lib.database import Database
from lib.todo_store import TodoStore


def get_database(request: Request) -> Database:
    """
    Get the process-wide Database instance.

    Returns the instance opened by the lifespan handler.
    """
    return request.app.state.database


def get_todo_service(database: Annotated[Database, Depends(get_database)]) -> TodoService:
    """Build a TodoService bound to the shared engine."""
    return TodoService(TodoStore(database.engine))


# Type aliases for dependency injection
DatabaseDep = Annotated[Database, Depends(get_database)]
TodoServiceDep = Annotated[TodoService, Depends(get_todo_service)]
