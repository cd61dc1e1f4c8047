# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .todo_service import TodoService

__all__ = [
    "TodoService",
]
