# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - todo.py: Todo create/update/response schemas and the error body
#
# These models define the "contract" between API and clients.
# =============================================================================

from .todo import (
    TEXT_MAX_LENGTH,
    ErrorResponse,
    Todo,
    TodoCreate,
    TodoDeleted,
    TodoUpdate,
)

# -----------------------------------------------------------------------------
# __all__ - Explicit public API
# -----------------------------------------------------------------------------
__all__ = [
    "TEXT_MAX_LENGTH",
    "ErrorResponse",
    "Todo",
    "TodoCreate",
    "TodoDeleted",
    "TodoUpdate",
]
